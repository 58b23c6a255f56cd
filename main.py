"""
Grade Assist: Interactive batch grading of student submissions

Usage:
  main.py [options]
  main.py (-h | --help)

Options:
  -c --config=PATH        Path to YAML configuration file (default: grader_config.yml if present).
  -w --working-dir=DIR    Directory holding the submissions (default: ./).
  -f --file-path=PATH     Roster spreadsheet (default: test.xlsx).
  -o --output-file=PATH   Grades log, resumed if it already exists (default: output.txt).
  -v --verbose            Print every probed file name and executed command.
  -h --help               Show this screen.
"""

from docopt import docopt
import sys
from pathlib import Path

from gradeassist.config import DEFAULT_CONFIG_FILENAME
from gradeassist.config_loader import GraderConfig, load_config
from gradeassist.session import run_grading_session


def resolve_config(arguments: dict) -> GraderConfig:
    """
    Build the session configuration from the config file and CLI flags.

    CLI flags take precedence over values from the config file.
    """
    if arguments["--config"]:
        config = load_config(Path(arguments["--config"]))
        print(f"Loaded configuration from {arguments['--config']}")
    elif Path(DEFAULT_CONFIG_FILENAME).exists():
        config = load_config(Path(DEFAULT_CONFIG_FILENAME))
        print(f"Loaded configuration from {DEFAULT_CONFIG_FILENAME}")
    else:
        config = GraderConfig()

    overrides = {}
    for flag, field in [
        ("--working-dir", "working_dir"),
        ("--file-path", "roster_path"),
        ("--output-file", "output_file"),
    ]:
        if arguments[flag]:
            overrides[field] = Path(arguments[flag])
    if arguments["--verbose"]:
        overrides["verbose"] = True

    return config.model_copy(update=overrides)


def main(argv: list[str] | None = None) -> int:
    """
    Main CLI entrypoint.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    arguments = docopt(__doc__, argv=argv)

    try:
        config = resolve_config(arguments)
        assignment = config.build_assignment()
    except Exception as e:
        print(f"Error loading config: {e}")
        return 1

    try:
        run_grading_session(config, assignment)
        return 0
    except KeyboardInterrupt:
        print("\nGrading interrupted by user.")
        return 1
    except Exception as e:
        print(f"\nError: {e}")
        if config.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
