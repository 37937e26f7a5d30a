# main.py
import sys

from travel_cost.app.cli import main

if __name__ == "__main__":
    # e.g. python main.py --source hyd_dilsukhnagar --destination blr_whitefield --repeat 3
    sys.exit(main())
