import math

import mcsrapi

PLACEHOLDER = "-"

# (MatchSplits field, timeline event type)
MILESTONE_EVENTS = (
    ("enter_nether", "story.enter_the_nether"),
    ("enter_bastion", "nether.find_bastion"),
    ("enter_fortress", "nether.find_fortress"),
    ("blind_travel", "projectelo.timeline.blind_travel"),
    ("enter_stronghold", "story.follow_ender_eye"),
    ("enter_end", "story.enter_the_end"),
    ("kill_dragon", "projectelo.timeline.dragon_death"),
)

def format_time(ms):
    """Format a duration in milliseconds as MM:SS.mmm.

    Minutes are not rolled over into hours, so an hour is 60:00.000.
    """
    ms = int(ms)
    minutes = ms // 60000
    seconds = (ms % 60000) // 1000
    milliseconds = ms % 1000

    return f"{minutes:02d}:{seconds:02d}.{milliseconds:03d}"

def format_time_or_dash(ms):
    if ms is None or isinstance(ms, bool) or not isinstance(ms, (int, float)):
        return PLACEHOLDER
    if math.isnan(ms) or math.isinf(ms):
        return PLACEHOLDER

    formatted_time = format_time(ms)
    if "nan" in formatted_time.lower():
        return PLACEHOLDER

    return formatted_time

def format_optional(value):
    if value is None:
        return PLACEHOLDER
    return str(value)

class SeasonStats:
    __slots__ = ("peak_elo", "personal_best", "season_wins", "season_losses")

    def __init__(self, peak_elo=0, personal_best=0, season_wins=None, season_losses=None):
        self.peak_elo = peak_elo
        self.personal_best = personal_best
        self.season_wins = season_wins
        self.season_losses = season_losses

    def update(self, profile, is_current_season):
        if profile.highest is not None and profile.highest > self.peak_elo:
            self.peak_elo = profile.highest

        # Last season with a best time wins, not the fastest one
        if profile.best_time is not None:
            self.personal_best = profile.best_time

        if is_current_season:
            self.season_wins = profile.wins
            self.season_losses = profile.losses

def aggregate_season_stats(player_name, season_count, fetch_profile=None):
    """Collect peak elo, personal best and current season record of a runner.

    Seasons are requested one after another from 1 up to `season_count`.
    Wins and losses are only taken from the last season.
    """
    if fetch_profile is None:
        fetch_profile = mcsrapi.get_season_profile

    stats = SeasonStats()
    for season in range(1, season_count + 1):
        profile = fetch_profile(player_name, season)
        stats.update(profile, season + 1 > season_count)

    return stats

class MatchSplits:
    __slots__ = ("match_id",) + tuple(field for field, event_type in MILESTONE_EVENTS) + ("final_time",)

    def __init__(self, match_id=None, final_time=PLACEHOLDER, **splits):
        self.match_id = match_id
        for field, event_type in MILESTONE_EVENTS:
            setattr(self, field, splits.get(field, PLACEHOLDER))
        self.final_time = final_time

    @classmethod
    def from_match(cls, match, uuid):
        splits = {}
        for field, event_type in MILESTONE_EVENTS:
            splits[field] = format_time_or_dash(match.find_event_time(event_type, uuid))

        return cls(match.match_id, format_time_or_dash(match.final_time_for(uuid)), **splits)

def resolve_player_uuids(runner_names, resolve_uuid=None):
    if resolve_uuid is None:
        resolve_uuid = mcsrapi.get_player_uuid

    return {runner_name: resolve_uuid(runner_name) for runner_name in runner_names}

def extract_splits(player_name, runner_names, resolve_uuid=None, fetch_match_id=None, fetch_match=None):
    if fetch_match_id is None:
        fetch_match_id = mcsrapi.get_recent_ranked_match_id
    if fetch_match is None:
        fetch_match = mcsrapi.get_match

    # Both runners are resolved on every call
    player_uuids = resolve_player_uuids(runner_names, resolve_uuid)
    uuid = player_uuids.get(player_name)
    if uuid is None:
        uuid = resolve_player_uuids((player_name,), resolve_uuid)[player_name]

    match_id = fetch_match_id(player_name)
    match = fetch_match(match_id)
    if match.match_id is None:
        match.match_id = match_id

    return MatchSplits.from_match(match, uuid)

def fetch_match_info(config, **fetchers):
    splits1 = extract_splits(config.runner1, config.runners, **fetchers)
    splits2 = extract_splits(config.runner2, config.runners, **fetchers)

    return splits1, splits2
