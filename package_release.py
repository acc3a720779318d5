import configargparse
import subprocess
import pathlib
import shutil
import os
import PyInstaller.__main__

ENTRY_SCRIPT = "mcsrrunnerinfo.py"
BUNDLED_CONFIG = "config.json"

def create_parser():
    ap = configargparse.ArgumentParser(
        allow_abbrev=False,
        config_file_parser_class=configargparse.YAMLConfigFileParser,
        default_config_files=["build_options.yml"]
    )

    ap.add_argument("--release_name", dest="release_name", required=True, help="Name of the release, e.g. v1.0.0")
    ap.add_argument("--sevenz_filename", dest="sevenz_filename", default="7z", help="Path to the 7-Zip executable used for the zip archive")
    ap.add_argument("--skip-zip", dest="skip_zip", action="store_true", help="Only build the release folder")

    return ap

def main():
    options = create_parser().parse_args()

    print("Building executable!")
    # The bundled config.json is the last fallback when no config is found next to the executable
    PyInstaller.__main__.run([ENTRY_SCRIPT, "-D", "--noconfirm", "--add-data", f"{BUNDLED_CONFIG}{os.pathsep}."])

    release_name = options.release_name
    release_dirname = f"release_working/{release_name}"
    print(f"Creating release at {release_dirname}!")
    release_dirpath = pathlib.Path(release_dirname)
    if release_dirpath.is_dir():
        shutil.rmtree(release_dirpath)

    print("Copying over files!")
    shutil.copytree("release_info", release_dirpath)
    shutil.copytree(f"dist/{pathlib.Path(ENTRY_SCRIPT).stem}", f"{release_dirname}/bin")

    if options.skip_zip:
        return

    print("Creating zip archive!")
    subprocess.run((options.sevenz_filename, "a", f"release_working/MCSRRunnerInfo_{release_name}.zip", f"./{release_dirname}/*", "-tzip", "-mx=9", "-mfb=258", "-mpass=3", "-mmt=off"), check=True)

if __name__ == "__main__":
    main()
