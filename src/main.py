#!/usr/bin/env python3
"""
Business Directory Runner

USAGE OPTIONS:

Option 1: Using Doppler (Recommended)
    doppler run -- python -m src.main list beauty

Option 2: Manual Environment Variables
    export BUSINESS_DIRECTORY_DATABASE_URL="postgresql+psycopg2://..."
    python -m src.main detail b1
    python -m src.main create '{"id": "b1", "name": "Salon X", "location": "Seoul", "species": "nails"}'
    python -m src.main update b1 '{"name": "New Name"}'
"""
import argparse
import sys

import ujson as json
from pydantic import ValidationError

from src.paths import logs_root
from src.doppler_bootstrap import inject_doppler_secrets
from src.db.db_interface import configure_engine
from src.business_directory import BusinessDirectoryService, BusinessDirectoryError
from src.utils.log import get_logger, setup_logger

logger = get_logger(__name__)


def json_object(value: str) -> dict:
	try:
		parsed = json.loads(value)
	except ValueError as e:
		raise argparse.ArgumentTypeError(f"invalid JSON: {e}")
	if not isinstance(parsed, dict):
		raise argparse.ArgumentTypeError("expected a JSON object")
	return parsed


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description="Query and edit the business directory")
	parser.add_argument("--doppler", action="store_true", help="load secrets from the Doppler CLI first")
	parser.add_argument("--database-url", help="override BUSINESS_DIRECTORY_DATABASE_URL")
	commands = parser.add_subparsers(dest="command", required=True)

	list_command = commands.add_parser("list", help="list businesses in a category")
	list_command.add_argument("category")

	detail_command = commands.add_parser("detail", help="show one business")
	detail_command.add_argument("business_id")

	create_command = commands.add_parser("create", help="create a business from a JSON object")
	create_command.add_argument("business_info", type=json_object)

	update_command = commands.add_parser("update", help="apply a JSON partial update to a business")
	update_command.add_argument("business_id")
	update_command.add_argument("update_info", type=json_object)
	return parser


def run_command(service: BusinessDirectoryService, args: argparse.Namespace):
	"""Dispatch a parsed command, returns a JSON-serialisable result."""
	if args.command == "list":
		return [listing.model_dump(mode="json", by_alias=True) for listing in service.list_by_category(args.category)]
	if args.command == "detail":
		return service.get_details(args.business_id).model_dump(mode="json")
	if args.command == "create":
		return service.create(args.business_info).model_dump(mode="json")
	if args.command == "update":
		return service.update(args.business_id, args.update_info).model_dump(mode="json")
	raise ValueError(f"Unknown command: {args.command}")


def main(argv=None, service=None) -> int:
	args = build_parser().parse_args(argv)
	setup_logger(logs_root)
	if args.doppler:
		inject_doppler_secrets()
	if args.database_url:
		configure_engine(args.database_url)

	service = service or BusinessDirectoryService()
	try:
		result = run_command(service, args)
	except (BusinessDirectoryError, ValidationError) as e:
		logger.error(f"❌ {args.command} failed: {e}")
		print(json.dumps({"error": type(e).__name__, "message": str(e)}))
		return 1

	print(json.dumps(result, indent=2, ensure_ascii=False))
	return 0


if __name__ == "__main__":
	sys.exit(main())
