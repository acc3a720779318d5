import configargparse
import pathlib
import sys

CONFIG_FILENAME = "config.json"

class ConfigError(RuntimeError):
    pass

class RunnerConfig:
    __slots__ = ("runner1", "runner2", "current_season_number", "output_dir", "verbose", "config_path")

    def __init__(self, runner1, runner2, current_season_number, output_dir, verbose=False, config_path=None):
        self.runner1 = runner1
        self.runner2 = runner2
        self.current_season_number = current_season_number
        self.output_dir = output_dir
        self.verbose = verbose
        self.config_path = config_path

    @property
    def runners(self):
        return (self.runner1, self.runner2)

class ConfigArgumentParser(configargparse.ArgumentParser):
    # argparse exits with status 2 on bad input, config problems must exit with 1
    def error(self, message):
        raise ConfigError(message)

def is_frozen():
    return getattr(sys, "frozen", False)

def executable_dirpath():
    return pathlib.Path(sys.executable).resolve().parent

def bundled_dirpath():
    # PyInstaller unpacks bundled data files into _MEIPASS
    bundle_dirname = getattr(sys, "_MEIPASS", None)
    if bundle_dirname is not None:
        return pathlib.Path(bundle_dirname)

    return pathlib.Path(__file__).resolve().parent

def default_config_candidates(cwd=None):
    if cwd is None:
        cwd = pathlib.Path.cwd()

    candidates = [pathlib.Path(cwd) / CONFIG_FILENAME]
    if is_frozen():
        candidates.append(executable_dirpath() / CONFIG_FILENAME)
    candidates.append(bundled_dirpath() / CONFIG_FILENAME)

    return candidates

def find_config_file(candidates):
    for candidate in candidates:
        candidate_path = pathlib.Path(candidate)
        if candidate_path.is_file():
            return candidate_path

    return None

def default_output_dirpath():
    if is_frozen():
        return executable_dirpath()

    return pathlib.Path.cwd()

def positive_int(value):
    try:
        value_as_int = int(value)
    except (TypeError, ValueError):
        raise configargparse.ArgumentTypeError(f"must be a positive integer (got {value})")

    if value_as_int < 1:
        raise configargparse.ArgumentTypeError(f"must be a positive integer (got {value})")

    return value_as_int

def create_parser(default_config_path):
    ap = ConfigArgumentParser(
        allow_abbrev=False,
        config_file_parser_class=configargparse.YAMLConfigFileParser,
        config_file_open_func=lambda filename: open(
            filename, "r", encoding="utf-8"
        )
    )

    ap.add_argument("-cfg", "--config", dest="config", default=default_config_path, is_config_file=True, help="Config file (JSON) containing `runner1`, `runner2` and `currentSeasonNumber`. If omitted, config.json is looked up in the working directory, then next to the executable, then in the bundled defaults. Arguments provided on the command line override the config file.")
    ap.add_argument("--runner1", dest="runner1", default=None, help="MCSR Ranked name of the first runner.")
    ap.add_argument("--runner2", dest="runner2", default=None, help="MCSR Ranked name of the second runner.")
    ap.add_argument("--currentSeasonNumber", dest="current_season_number", type=positive_int, default=None, help="Number of the current ranked season. Seasons 1 up to this one are queried.")
    ap.add_argument("--output-dir", dest="output_dir", default=None, help="Folder the info files are written to. Defaults to the folder of the executable, or the working directory when run as a script.")
    ap.add_argument("--verbose", dest="verbose", action="store_true", help="Print every request and the full traceback on errors.")

    return ap

def load_config(argv=None, candidates=None):
    if candidates is None:
        candidates = default_config_candidates()

    default_config_path = find_config_file(candidates)
    ap = create_parser(str(default_config_path) if default_config_path is not None else None)
    args = ap.parse_args(argv)

    if args.config is None and (args.runner1 is None or args.runner2 is None or args.current_season_number is None):
        searched = ", ".join(str(candidate) for candidate in candidates)
        raise ConfigError(f"No {CONFIG_FILENAME} found (searched: {searched})")

    if not args.runner1 or not args.runner2:
        raise ConfigError("Config file must contain both runner1 and runner2")

    if args.current_season_number is None:
        raise ConfigError("Config file must contain currentSeasonNumber")

    if args.output_dir is not None:
        output_dir = pathlib.Path(args.output_dir)
    else:
        output_dir = default_output_dirpath()

    config_path = pathlib.Path(args.config) if args.config is not None else None

    return RunnerConfig(args.runner1, args.runner2, args.current_season_number, output_dir, args.verbose, config_path)
