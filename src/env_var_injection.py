import os

from src import consts
from src.utils.strings import str2bool


def sanitize_env_var(name):
	value = os.getenv(name)
	if value is None:
		raise RuntimeError(f"Missing required environment variable: {name}")
	value = value.replace('"', "")
	return value


def optional_env_var(name, default: str) -> str:
	value = os.getenv(name)
	if value is None:
		return default
	return value.replace('"', "")


# Read lazily so importing the package never requires a configured database
def get_database_url() -> str:
	return sanitize_env_var(consts.DATABASE_URL_ENV)


def parallel_reads_enabled() -> bool:
	return str2bool(optional_env_var(consts.PARALLEL_READS_ENV, "false"))


def skip_empty_tags_enabled() -> bool:
	return str2bool(optional_env_var(consts.SKIP_EMPTY_TAGS_ENV, "false"))
