#!/usr/bin/env python
"""
Run the Streamlit price calculator.

Usage:
    python scripts/run_app.py [--light] [--currency SYMBOL]
"""
import os
import subprocess
import sys
from pathlib import Path


def main():
    # Get the UI module path
    project_root = Path(__file__).parent.parent
    ui_path = project_root / 'src' / 'price_calculator' / 'ui' / 'app_streamlit.py'

    if not ui_path.exists():
        print(f"ERROR: UI module not found at {ui_path}")
        sys.exit(1)

    env = os.environ.copy()
    args = sys.argv[1:]
    if '--light' in args:
        env['PRICE_CALC_THEME'] = 'light'
    if '--currency' in args:
        idx = args.index('--currency')
        if idx + 1 >= len(args):
            print("ERROR: --currency needs a symbol, e.g. --currency '$'")
            sys.exit(1)
        env['PRICE_CALC_CURRENCY'] = args[idx + 1]

    # Run streamlit
    cmd = [sys.executable, '-m', 'streamlit', 'run', str(ui_path)]
    print(f"Starting Streamlit: {' '.join(cmd)}")

    try:
        subprocess.run(cmd, cwd=str(project_root), env=env)
    except KeyboardInterrupt:
        print("\nApplication stopped.")


if __name__ == "__main__":
    main()
