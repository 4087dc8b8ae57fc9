# smoke_test.py
"""
Smoke test minimal, sans saisie clavier.
Valide :
- chargement de la carte et des tables par défaut,
- réservation d'une table pour 2 personnes,
- prise de commande (2 pizzas + 1 salade),
- encaissement avec rendu de monnaie,
- affichage des chiffres de base.
"""

from datetime import datetime

from RestoOPS_V1.core.errors import NoAvailableTableError
from RestoOPS_V1.ui.display import format_currency, show_payments
from RestoOPS_V1.ui.manager import build_system


def main():
    # 1) Facade seedée (M1..M4, T1..T5)
    restaurant = build_system()
    print(f"✔ Carte : {len(restaurant.list_menu_items())} plats, "
          f"{len(restaurant.list_tables())} tables")

    # 2) Réservation
    when = datetime(2024, 6, 1, 18, 0)
    reservation = restaurant.reserve_table("Dara", "012 345 678", when, 2)
    print(f"✔ Réservation {reservation.id} sur {reservation.table_id}")

    # 3) Même créneau : T2 prend le relais, puis plus de table pour 2 à 8 personnes
    second = restaurant.reserve_table("Sokha", "098 765 432", when, 2)
    print(f"✔ Deuxième réservation {second.id} sur {second.table_id}")
    try:
        restaurant.reserve_table("Vanna", "011 222 333", when, 9)
    except NoAvailableTableError as exc:
        print(f"✔ Refus attendu : {exc}")

    # 4) Commande
    order_id = restaurant.create_order(reservation.table_id, {"M1": 2, "M2": 1})
    order = restaurant.find_order(order_id)
    print(f"✔ Commande {order_id} : {format_currency(order.total_amount)}")

    # 5) Paiement
    payment = restaurant.add_payment(
        reservation.table_id, reservation.id, order_id, 30.0, "aba"
    )
    print(f"✔ Paiement {payment.payment_id} : monnaie {format_currency(payment.change)}")

    print("\n=== Résumé Smoke Test ===")
    show_payments(restaurant)


if __name__ == "__main__":
    main()
