from RestoOPS_V1.config import load_settings, setup_logging
from RestoOPS_V1.ui.manager import build_system, run_restaurant_management_system


def run():
    settings = load_settings()
    setup_logging(settings)
    # Carte et plan de salle par défaut (data/seed.json)
    restaurant = build_system(settings)
    run_restaurant_management_system(restaurant)


if __name__ == "__main__":
    run()
