#!/usr/bin/env python
"""
Run the Streamlit delivery calculator page.

Usage:
    python scripts/run_app.py [--port 8501] [--headless]
"""
import argparse
import subprocess
import sys
from pathlib import Path


def build_command(ui_path: Path, port: int, headless: bool) -> list[str]:
    """Streamlit command line for the order form page."""
    cmd = [
        sys.executable, '-m', 'streamlit', 'run', str(ui_path),
        '--server.port', str(port),
    ]
    if headless:
        cmd += ['--server.headless', 'true']
    return cmd


def main():
    parser = argparse.ArgumentParser(description="Run the delivery calculator page")
    parser.add_argument("--port", type=int, default=8501)
    parser.add_argument("--headless", action="store_true", help="Do not open a browser")
    args = parser.parse_args()

    project_root = Path(__file__).parent.parent
    ui_path = project_root / 'src' / 'delivery_calc' / 'ui' / 'app_streamlit.py'
    if not ui_path.exists():
        print(f"ERROR: order form page not found at {ui_path}")
        sys.exit(1)

    cmd = build_command(ui_path, args.port, args.headless)
    print(f"Starting delivery calculator on port {args.port}...")
    try:
        subprocess.run(cmd, cwd=str(project_root))
    except KeyboardInterrupt:
        print("\nDelivery calculator stopped.")


if __name__ == "__main__":
    main()
