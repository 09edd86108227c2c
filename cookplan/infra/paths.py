from pathlib import Path

# Centralized paths for data files (single source of truth)
DATA_DIR = (Path(__file__).parent.parent / 'data').resolve()
SAMPLE_DATA_FILE = DATA_DIR / 'sample_data.json'

__all__ = ['DATA_DIR', 'SAMPLE_DATA_FILE']
