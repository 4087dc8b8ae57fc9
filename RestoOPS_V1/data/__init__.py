# RestoOPS_V1/data/__init__.py
"""
Carte et plan de salle de démarrage.

`get_SEED()` lit `seed.json` (ou le fichier indiqué) à chaque appel ;
le module `seed` n'est importé qu'à ce moment-là.
"""


def get_SEED(json_path=None):
    from .seed import load_seed

    return load_seed(json_path)
