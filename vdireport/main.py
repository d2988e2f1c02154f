"""Main application entry point for vdireport."""

import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from vdireport import __version__
from vdireport.decoding.vdi_mode import create_decoder
from vdireport.report.assembler import ReportAssembler
from vdireport.report.console import ReportPrinter
from vdireport.storage.session_file import (
    SessionFileError,
    SessionFileNotFoundError,
    SessionFileReader,
)
from vdireport.system.base import AbstractOsInfoProvider
from vdireport.system.windows_registry import WindowsRegistryOsInfoProvider

from .config import ReportConfig

logger = logging.getLogger(__name__)


class ReportRunner:
    """Reads one session snapshot and prints its report."""

    def __init__(self, config: ReportConfig,
                 os_provider: Optional[AbstractOsInfoProvider] = None,
                 printer: Optional[ReportPrinter] = None):
        self.config = config
        self.os_provider = os_provider or WindowsRegistryOsInfoProvider()
        self.printer = printer or ReportPrinter(label_width=config.get('report.label_width', 24))
        self.reader = SessionFileReader(
            file_path=config.get('session.file_path'),
            history_key=config.get('session.history_key', 'sessionHistory'),
        )
        self.assembler = ReportAssembler(
            decoder=create_decoder(config.get('vdi.mode_scheme', 'positional')),
            slimcore_stack=config.get('vdi.slimcore_stack', 'remote'),
        )

    def run(self, as_json: bool = False) -> int:
        """Generate and print the report.

        Returns:
            Process exit code
        """
        logger.info(f"Reading session file: {self.reader.file_path}")
        try:
            history = self.reader.load()
        except SessionFileNotFoundError as e:
            logger.error(str(e))
            self.printer.print_error(str(e))
            return 1
        except SessionFileError as e:
            logger.error(f"Unusable session file {self.reader.file_path}: {e}")
            self.printer.print_error(str(e))
            return 1

        os_descriptor = self.os_provider.read()
        report = self.assembler.assemble(history, os_descriptor)

        if as_json:
            self.printer.print_json(report)
        else:
            self.printer.print_report(report)
        return 0


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_log_level(level) -> int:
    """Map a level name to its logging constant.

    Raises:
        ValueError: If the name is not a standard logging level
    """
    name = str(level).upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Invalid logging level '{level}' (expected one of: {', '.join(LOG_LEVELS)})")
    return getattr(logging, name)


def setup_logging(config, level: str = "WARNING") -> None:

    """Set up logging configuration from YAML config."""
    numeric_level = resolve_log_level(level)
    log_file_path = config.get('logging.file_path')
    console_output = config.get('logging.console_output', True)

    handlers = []

    # File handler - only if a path is configured
    if log_file_path:
        log_dir = Path(log_file_path).parent
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file_path)
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
        )
        file_handler.setFormatter(file_formatter)
        handlers.append(file_handler)

    # Console handler on stderr; stdout is reserved for the report
    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)
        console_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        console_handler.setFormatter(console_formatter)
        handlers.append(console_handler)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(numeric_level)
    for handler in handlers:
        root_logger.addHandler(handler)
    if not handlers:
        root_logger.addHandler(logging.NullHandler())

    logger.info("vdireport starting up")
    logger.info(f"Log file: {log_file_path}")
    logger.info(f"Log level set to: {level}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="vdireport - VDI session diagnostic report",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to configuration YAML file (default: vdireport.yaml in the current directory)"
    )

    parser.add_argument(
        "--session-file",
        type=str,
        help="Path to the session history JSON (overrides config)"
    )

    parser.add_argument(
        "--scheme",
        type=str,
        choices=["positional", "legacy", "auto"],
        help="vdiMode code scheme (overrides config, default: positional)"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level (overrides config, default: WARNING)"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"vdireport v{__version__}"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for vdireport."""
    args = build_parser().parse_args(argv)

    try:
        config = ReportConfig(args.config)
    except (FileNotFoundError, ValueError) as e:
        ReportPrinter().print_error(str(e))
        sys.exit(1)

    if args.session_file:
        config.set('session.file_path', args.session_file)
    if args.scheme:
        config.set('vdi.mode_scheme', args.scheme)

    try:
        setup_logging(config, args.log_level or config.get('logging.level', 'WARNING'))
    except ValueError as e:
        ReportPrinter().print_error(str(e))
        sys.exit(1)

    try:
        runner = ReportRunner(config)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        ReportPrinter().print_error(str(e))
        sys.exit(1)

    sys.exit(runner.run(as_json=args.json))


if __name__ == "__main__":
    main()
