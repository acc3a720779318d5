"""Typed views over the MCSR Ranked API payloads.

The API omits fields freely (unplayed seasons, forfeited matches, players
that never reached a milestone), so every field here is optional and is
set to None when it is missing or has the wrong type.
"""

import math

def dig(obj, *keys):
    for key in keys:
        if isinstance(obj, dict):
            obj = obj.get(key)
        elif isinstance(obj, list) and isinstance(key, int):
            obj = obj[key] if -len(obj) <= key < len(obj) else None
        else:
            return None

    return obj

def optional_number(value):
    # bool is an int subclass but never a valid count or time
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    return value

def optional_str(value):
    if value is None:
        return None
    return str(value)

class SeasonProfile:
    __slots__ = ("highest", "best_time", "wins", "losses")

    def __init__(self, highest, best_time, wins, losses):
        self.highest = highest
        self.best_time = best_time
        self.wins = wins
        self.losses = losses

    @classmethod
    def from_json(cls, data):
        return cls(
            optional_number(dig(data, "seasonResult", "highest")),
            optional_number(dig(data, "statistics", "total", "bestTime", "ranked")),
            optional_number(dig(data, "statistics", "season", "wins", "ranked")),
            optional_number(dig(data, "statistics", "season", "loses", "ranked"))
        )

class TimelineEvent:
    __slots__ = ("uuid", "type", "time")

    def __init__(self, uuid, type, time):
        self.uuid = uuid
        self.type = type
        self.time = time

    @classmethod
    def from_json(cls, data):
        return cls(
            normalize_uuid(dig(data, "uuid")),
            optional_str(dig(data, "type")),
            optional_number(dig(data, "time"))
        )

class MatchRecord:
    __slots__ = ("match_id", "timelines", "completion_uuid", "completion_time")

    def __init__(self, match_id, timelines, completion_uuid, completion_time):
        self.match_id = match_id
        self.timelines = timelines
        self.completion_uuid = completion_uuid
        self.completion_time = completion_time

    @classmethod
    def from_json(cls, data):
        timelines = dig(data, "timelines")
        if not isinstance(timelines, list):
            timelines = []

        return cls(
            dig(data, "id"),
            [TimelineEvent.from_json(event) for event in timelines if isinstance(event, dict)],
            normalize_uuid(dig(data, "completions", 0, "uuid")),
            optional_number(dig(data, "completions", 0, "time"))
        )

    def find_event_time(self, event_type, uuid):
        # First match in timeline order wins
        for event in self.timelines:
            if event.type == event_type and event.uuid is not None and event.uuid == uuid:
                return event.time

        return None

    def final_time_for(self, uuid):
        if self.completion_uuid is not None and self.completion_uuid == uuid:
            return self.completion_time

        return None

def normalize_uuid(uuid):
    if uuid is None:
        return None
    return str(uuid).replace("-", "").lower()
