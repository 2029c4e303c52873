"""
This script runs the Flask web dashboard.
"""

from dashboard.app import create_app
from smart_waste.app_factory import create_facade, initialize_app
from waste_logs.config import DASHBOARD_HOST, DASHBOARD_PORT

if __name__ == "__main__":
    initialize_app()
    facade = create_facade()
    facade.refresh_service.start_in_background()
    # Running on 0.0.0.0 makes it accessible from outside the container
    create_app(facade).run(host=DASHBOARD_HOST, port=DASHBOARD_PORT)
