from kingmenu.utilities.config import DATA_DIR, DISHES_FILE

# Centralized paths for data files (single source of truth)
DATA_DIR = DATA_DIR.resolve()
DISHES_FILE = DISHES_FILE.resolve()

__all__ = ['DATA_DIR', 'DISHES_FILE']
