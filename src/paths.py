from pathlib import Path

# project_root = parent of the directory containing paths.py
project_root = Path(__file__).resolve().parent.parent
logs_root = project_root / "logs"
