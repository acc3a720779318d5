import requests
import urllib.parse
import time

from mcsrmodels import SeasonProfile, MatchRecord, normalize_uuid

API_URL = "https://mcsrranked.com/api"
MOJANG_PROFILE_URL = "https://api.mojang.com/users/profiles/minecraft"

# Match type filter used by the match history endpoint. 2 is ranked.
RANKED_MATCH_TYPE = 2

# Set by the driver when --verbose is passed
verbose = False

class ApiError(RuntimeError):
    pass

class PlayerNotFoundError(ApiError):
    pass

class NoRankedMatchError(ApiError):
    pass

def request(url, params=None):
    if params is None:
        params = {}

    if verbose:
        print(f"url: {url}?{urllib.parse.urlencode(params, doseq=True)}")

    start_time = time.time()
    try:
        r = requests.get(url, params=params)
    except requests.exceptions.RequestException as e:
        raise ApiError(f"Network error while requesting {url}: {e}") from e
    end_time = time.time()

    if verbose:
        print(f"Request took {end_time - start_time}.")

    return r

def get(endpoint, params=None):
    url = f"{API_URL}{endpoint}"
    r = request(url, params)

    if r.status_code != 200:
        raise ApiError(f"API returned {r.status_code} for {endpoint}: {r.reason}")

    try:
        data = r.json()
    except ValueError as e:
        raise ApiError(f"API returned invalid JSON for {endpoint}") from e

    if not isinstance(data, dict) or data.get("status") is None:
        raise ApiError(f"error, no status given for {endpoint}")

    if data["status"] != "success":
        raise ApiError(f"API returned status \"{data['status']}\" for {endpoint}: {data.get('data')}")

    return data

def quote_name(name):
    return urllib.parse.quote(name, safe="")

def get_season_profile(username, season):
    data = get(f"/users/{quote_name(username)}", {"season": season})
    return SeasonProfile.from_json(data.get("data"))

def get_player_uuid(username):
    # Timeline events are keyed by uuid, so names have to be resolved first
    r = request(f"{MOJANG_PROFILE_URL}/{quote_name(username)}")
    if r.status_code != 200:
        raise PlayerNotFoundError(f"Could not resolve player \"{username}\" (status {r.status_code})")

    try:
        data = r.json()
    except ValueError as e:
        raise PlayerNotFoundError(f"Could not resolve player \"{username}\" (invalid response)") from e

    player_id = data.get("id") if isinstance(data, dict) else None
    if not player_id:
        raise PlayerNotFoundError(f"Could not resolve player \"{username}\" (no id in response)")

    return normalize_uuid(player_id)

def get_recent_ranked_match_id(username):
    data = get(f"/users/{quote_name(username)}/matches", {"type": RANKED_MATCH_TYPE})
    matches = data.get("data")
    if not isinstance(matches, list) or len(matches) == 0:
        raise NoRankedMatchError(f"No ranked matches found for {username}")

    match_id = matches[0].get("id") if isinstance(matches[0], dict) else None
    if match_id is None:
        raise NoRankedMatchError(f"Most recent ranked match of {username} has no id")

    return match_id

def get_match(match_id):
    data = get(f"/matches/{quote_name(str(match_id))}")
    return MatchRecord.from_json(data.get("data"))
