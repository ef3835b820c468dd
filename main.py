# main.py
import sys
import os

# Add the 'src' directory to the system path
src_path = os.path.join(os.path.dirname(__file__), 'src')
sys.path.insert(0, src_path)

from app import App
from levels.station_data import StationDataset, StationDataError

if __name__ == '__main__':
    print("Starting Budapest Metro...")
    project_root = os.path.dirname(os.path.abspath(__file__))
    try:
        dataset = StationDataset(StationDataset.default_path(project_root))
    except StationDataError as e:
        print(f"Cannot start without station data: {e}")
        sys.exit(1)

    seed = int(sys.argv[1]) if len(sys.argv) > 1 and sys.argv[1].lstrip('-').isdigit() else None
    app = App(project_root, dataset.build_index(), seed=seed)
    app.run()
