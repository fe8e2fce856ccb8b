"""
BE-Alert XLSX to CSV converter.

Without arguments the desktop window is started. With an XLSX path the
conversion runs headless:

    python main.py contacten.xlsx                # writes contacten.csv
    python main.py contacten.xlsx -o alert.csv
    python main.py contacten.xlsx --check        # columns only
"""

import argparse
import logging
import os
import sys
import textwrap
from pathlib import Path

from controllers.conversion_controller import ConversionController
from services.errors import ConversionError

LOG_LEVEL = os.getenv("BEALERT_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("bealert")


def setup_logging(level=LOG_LEVEL):
    root = logging.getLogger()
    if root.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level, logging.INFO))


def build_parser() -> argparse.ArgumentParser:
    cli = argparse.ArgumentParser(
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(__doc__),
    )
    cli.add_argument("xlsx", nargs="?", help="input workbook (.xlsx); omit to open the window")
    cli.add_argument("-o", "--out", help="output CSV (default: <xlsx stem>.csv next to the input)")
    cli.add_argument("--check", action="store_true", help="only validate the required columns")
    return cli


def run_cli(args) -> int:
    controller = ConversionController()
    try:
        if args.check:
            controller.validate_schema(args.xlsx)
            print("XLSX columns OK.")
            return 0
        out = args.out or str(Path(args.xlsx).with_name(controller.suggest_output_name(args.xlsx)))
        result = controller.convert(args.xlsx, out)
    except ConversionError as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"CSV saved: {result.output_path} ({result.rows_written} rows)")
    return 0


def main(argv=None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)
    if args.xlsx:
        return run_cli(args)

    from ui.main_window import MainWindow
    MainWindow().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
