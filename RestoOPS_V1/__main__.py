"""
Lanceur 'python -m RestoOPS_V1'
"""

from RestoOPS_V1.ui.manager import run_restaurant_management_system

if __name__ == "__main__":
    run_restaurant_management_system()
