import logging

from smart_waste.app_factory import create_facade
from waste_logs.services.data_source import InMemorySource

# --- Configuration ---
# Configure logging to display INFO level messages
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

# A snapshot shaped like the "waste_logs" collection in the database
SAMPLE_SNAPSHOT = {
    "-Nx01": {"type": "Metal", "timestamp": "1735689600"},  # 2025-01-01 00:00:00
    "-Nx02": {"type": "Wet", "timestamp": "1735732800"},  # 2025-01-01 12:00:00
    "-Nx03": {"type": "Dry", "timestamp": "1735775999"},  # 2025-01-01 23:59:59
    "-Nx04": {"type": "Metal", "timestamp": "1735776000"},  # 2025-01-02 00:00:00
    "-Nx05": {"type": "Plastic", "timestamp": "1735790400"},  # unknown category
    "-Nx06": {"type": "Wet", "timestamp": "not-a-number"},
}

START_DATE = "2025-01-01"
END_DATE = "2025-01-01"


def main():
    """
    An example run of the dashboard pipeline without a network connection.
    """
    facade = create_facade(source=InMemorySource(SAMPLE_SNAPSHOT))
    facade.refresh()

    data = facade.get_dashboard_data(START_DATE, END_DATE)
    logging.info(f"Total items: {data['total_count']}")
    for row in data["category_counts"]:
        logging.info(f"{row['name']}: {row['count']}")
    logging.info(f"Most common: {data['most_common']['name']}")
    logging.info(f"Logs on {START_DATE}: {data['filtered_count']}")
    for log in data["logs"]:
        logging.info(f"  {log['timestamp']} {log['category']}")


if __name__ == "__main__":
    main()
