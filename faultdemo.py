"""
faultdemo: Exception Handling Demonstration

Triggers eleven kinds of runtime faults one after another, catches each
one where it happens, and prints what was caught.
"""

import sys
import logging
from pathlib import Path
from typing import List, Optional

from colorama import Fore, Style, just_fix_windows_console

from core import Config, FaultDemonstrator, UnknownScenarioError, create_reporter, setup_logging
from core.logger import close_logging
from utils.cli_runtime import build_faultdemo_arg_parser, configure_windows_console_utf8
from utils.error_messages import (format_error, format_logging_error,
                                  format_unhandled_fault_error,
                                  format_unknown_scenario_error)

DEFAULT_CONFIG_PATH = Path('config_files/config.json')


def _print_error(message: str):
    print(Fore.RED + message + Style.RESET_ALL, file=sys.stderr)


def load_config(config_arg: Optional[str]) -> Config:
    """Load the config file named on the command line, or the default one if present."""
    if config_arg:
        config_path = Path(config_arg)
        if not config_path.exists():
            _print_error(format_error(
                what_failed="Config file not found",
                reason="The path given with --config does not exist",
                action="Fix the path or drop --config to use defaults",
                location=config_path
            ))
            sys.exit(2)
        return Config(config_path)

    return Config(DEFAULT_CONFIG_PATH if DEFAULT_CONFIG_PATH.exists() else None)


def main(argv: Optional[List[str]] = None):
    """Main entry point with defensive error handling."""
    configure_windows_console_utf8()
    just_fix_windows_console()

    args = build_faultdemo_arg_parser().parse_args(argv)

    try:
        config = load_config(args.config)

        # Set up logging
        if not args.no_log:
            try:
                log_file = setup_logging(config.log_folder, config.max_log_files)
            except OSError as e:
                _print_error(format_logging_error(Path(config.log_folder), e))
                sys.exit(1)
            logging.info("=" * 70)
            logging.info("faultdemo started")
            logging.info(f"Log file: {log_file}")

        demonstrator = FaultDemonstrator(
            config,
            reporter=create_reporter(json_output=args.json, no_color=args.no_color),
        )

        if args.list:
            for name in demonstrator.names:
                print(name)
            sys.exit(0)

        if args.only:
            try:
                demonstrator.run(args.only)
            except UnknownScenarioError as e:
                _print_error(format_unknown_scenario_error(e.name, demonstrator.names))
                logging.error(f"Unknown scenario requested: {e.name}")
                sys.exit(2)
        else:
            demonstrator.run_all()

        logging.info("faultdemo completed successfully")

    except KeyboardInterrupt:
        print(Fore.YELLOW + "\n\nDemonstration interrupted by user" + Style.RESET_ALL, file=sys.stderr)
        logging.info("User interrupted demonstration")
        sys.exit(0)
    except Exception as e:
        _print_error(format_unhandled_fault_error(e))
        logging.error(f"Unhandled fault: {e}", exc_info=True)
        sys.exit(1)
    finally:
        close_logging()


if __name__ == '__main__':
    main()
