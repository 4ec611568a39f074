# src/doppler_bootstrap.py

import os
import subprocess

from src import consts
from src.utils.log import get_logger

logger = get_logger(__name__)


def inject_doppler_secrets(project=None, config=None):
	"""Load secrets from the Doppler CLI into os.environ unless the database URL is already set."""
	if consts.DATABASE_URL_ENV in os.environ:
		logger.debug("doppler secrets already present")
		return []
	logger.info("doppler secrets not present yet, injecting...")

	cmd = ["doppler", "secrets", "download", "--no-file", "--format", "env"]
	if project:
		cmd += ["--project", project]
	if config:
		cmd += ["--config", config]

	try:
		output = subprocess.check_output(
			cmd,
			text=True,
			stderr=subprocess.STDOUT  # ensure errors are caught
		)
	except FileNotFoundError:
		raise RuntimeError("❌ Doppler CLI not found. Please install it.")
	except subprocess.CalledProcessError as e:
		raise RuntimeError(f"❌ Failed to load Doppler secrets:\n{e.output.strip()}") from e

	injected = []
	for line in output.strip().splitlines():
		if "=" in line:
			key, value = line.split("=", 1)
			os.environ[key] = value.strip('"')
			injected.append(key)
			logger.info(f"Injected secret from doppler: {key}")
	return injected


if __name__ == "__main__":
	inject_doppler_secrets()
