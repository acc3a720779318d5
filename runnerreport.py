import pathlib

from runnerstats import format_optional, format_time

RUNNER_INFO_FILENAME = "runner{number}_info.txt"
MATCH_INFO_FILENAME = "match_info_{number}.txt"

runner_info_template = """\
Runner: {runner}
Peak Elo: {peak_elo}
Personal Best: {personal_best}
Season Wins: {season_wins}
Season Losses: {season_losses}
"""

match_info_template = """\
Runner: {runner}
Match ID: {match_id}
Enter Nether: {enter_nether}
Enter Bastion: {enter_bastion}
Enter Fortress: {enter_fortress}
Blind Travel: {blind_travel}
Enter Stronghold: {enter_stronghold}
Enter End: {enter_end}
Kill Dragon: {kill_dragon}
Final Time: {final_time}
"""

def format_runner_info(runner, stats):
    return runner_info_template.format(
        runner=runner,
        peak_elo=stats.peak_elo,
        personal_best=format_time(stats.personal_best),
        season_wins=format_optional(stats.season_wins),
        season_losses=format_optional(stats.season_losses)
    )

def format_match_info(runner, splits):
    return match_info_template.format(
        runner=runner,
        match_id=format_optional(splits.match_id),
        enter_nether=splits.enter_nether,
        enter_bastion=splits.enter_bastion,
        enter_fortress=splits.enter_fortress,
        blind_travel=splits.blind_travel,
        enter_stronghold=splits.enter_stronghold,
        enter_end=splits.enter_end,
        kill_dragon=splits.kill_dragon,
        final_time=splits.final_time
    )

def save_report(filename, content, output_dir):
    output_dirpath = pathlib.Path(output_dir)
    output_dirpath.mkdir(parents=True, exist_ok=True)
    filepath = output_dirpath / filename

    with open(filepath, "w", encoding="utf-8") as f:
        f.write(content)

    return filepath

def build_reports(config, info1, info2, splits1, splits2):
    """Return (label, filename, content) for every info file of a run."""
    return [
        (config.runner1, RUNNER_INFO_FILENAME.format(number=1), format_runner_info(config.runner1, info1)),
        (config.runner2, RUNNER_INFO_FILENAME.format(number=2), format_runner_info(config.runner2, info2)),
        (f"{config.runner1}'s last match", MATCH_INFO_FILENAME.format(number=1), format_match_info(config.runner1, splits1)),
        (f"{config.runner2}'s last match", MATCH_INFO_FILENAME.format(number=2), format_match_info(config.runner2, splits2)),
    ]
