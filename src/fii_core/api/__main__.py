"""Allow running the API as: python -m fii_core.api [--config path]."""

import argparse
import os

from fii_core.api.runner import main

parser = argparse.ArgumentParser(description="FII signal API server")
parser.add_argument("--config", default=None, help="Path to config.yaml")
args = parser.parse_args()
if args.config:
    os.environ["FII_CONFIG_PATH"] = args.config
main()
