import argparse
import logging

from waste_logs.config import DASHBOARD_HOST, DASHBOARD_PORT

from .app_factory import create_facade, initialize_app

logger = logging.getLogger(__name__)


def print_summary(data: dict) -> None:
    if data.get("error"):
        print(f"Error: {data['error']}")
        return
    print(f"Total items: {data['total_count']}")
    for row in data["category_counts"]:
        print(f"  {row['name']}: {row['count']}")
    if data["most_common"]:
        most_common = data["most_common"]
        print(f"Most common: {most_common['name']} ({most_common['count']})")


def main(argv=None):
    initialize_app()
    parser = argparse.ArgumentParser(description="Smart waste dashboard runner.")
    parser.add_argument(
        "command",
        choices=["dashboard", "summary"],
        help="The command to execute.",
    )
    parser.add_argument("--start-date", help="First day to include (YYYY-MM-DD).")
    parser.add_argument("--end-date", help="Last day to include (YYYY-MM-DD).")
    args = parser.parse_args(argv)

    facade = create_facade()

    if args.command == "summary":
        if not facade.refresh():
            logger.error("Could not fetch waste logs.")
            return 1
        print_summary(facade.get_dashboard_data(args.start_date, args.end_date))
    elif args.command == "dashboard":
        from dashboard.app import create_app
        logger.info("Starting dashboard...")
        facade.refresh_service.start_in_background()
        create_app(facade).run(host=DASHBOARD_HOST, port=DASHBOARD_PORT)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
