#!/usr/bin/env python
import asyncio
import sys
import traceback

import mcsrapi
import runnerconfig
import runnerreport
import runnerstats

def print_exception(e, additional_msg="", verbose=False):
    error_msg = e.args[0] if len(e.args) >= 1 else "(Not provided)"

    print(f"Error: {additional_msg}{error_msg}", file=sys.stderr)

    if verbose:
        output = f"""\
-- DEBUG INFORMATION --
Error type: {e.__class__.__name__}
Traceback (most recent call last)
{''.join(traceback.format_tb(e.__traceback__))}"""
        print(output, file=sys.stderr)

async def save_to_file(label, filename, content, output_dir):
    filepath = await asyncio.to_thread(runnerreport.save_report, filename, content, output_dir)
    print(f"✓ Saved information for {label} to {filename}")

    return filepath

async def fetch_all(config):
    return await asyncio.gather(
        asyncio.to_thread(runnerstats.aggregate_season_stats, config.runner1, config.current_season_number),
        asyncio.to_thread(runnerstats.aggregate_season_stats, config.runner2, config.current_season_number),
        asyncio.to_thread(runnerstats.fetch_match_info, config)
    )

async def run(config):
    print(f"Found runners: {config.runner1} and {config.runner2}\n")

    print("Fetching information...\n")
    info1, info2, (splits1, splits2) = await fetch_all(config)

    reports = runnerreport.build_reports(config, info1, info2, splits1, splits2)
    return await asyncio.gather(*(
        save_to_file(label, filename, content, config.output_dir)
        for label, filename, content in reports
    ))

def main(argv=None):
    verbose = False
    try:
        print("Starting runner information fetcher...\n")

        config = runnerconfig.load_config(argv)
        verbose = config.verbose
        mcsrapi.verbose = verbose
        if verbose and config.config_path is not None:
            print(f"Using config file: {config.config_path}")

        asyncio.run(run(config))

        print("\n✓ All information fetched and saved successfully!")
    except Exception as e:
        print_exception(e, verbose=verbose)
        return 1
    finally:
        # Only lives for one run
        mcsrapi.verbose = False

    return 0

if __name__ == "__main__":
    sys.exit(main())
