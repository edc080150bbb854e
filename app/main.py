"""
FPL Proxy - Main FastAPI Application
Player and fixture data fetched LIVE from the Fantasy Premier League API,
kept for a short while in memory to spare upstream calls.
"""
import logging
import re
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.api_client import FPLClient
from app.errors import ClientError, InvalidInput, NotFound
from app.fixture_selector import index_teams_by_id, select_upcoming_fixtures
from app.schemas import ErrorResponse
from app.view_models import players_to_view_models, project_player
from config.settings import APP_VERSION, settings

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger("main")

APP_NAME = "FPL Proxy"

# Plain decimal ids only ("7", " +7 ", "7.0"); no exponents, underscores or hex
WHOLE_NUMBER_RE = re.compile(r"^\s*[+-]?\d+(\.0*)?\s*$")

app = FastAPI(
    title=APP_NAME,
    description="Fantasy Premier League players and fixtures for the frontend",
    version=APP_VERSION
)

# Single client (and cache) for the lifetime of the process
app.state.fpl_client = FPLClient()


def get_fpl_client(request: Request) -> FPLClient:
    """Dependency returning the shared upstream client."""
    return request.app.state.fpl_client


def parse_id(raw: str) -> Optional[int]:
    """Convert a path segment like '12' or '12.0' to an int, None if not a whole number."""
    if not WHOLE_NUMBER_RE.match(raw):
        return None
    return int(raw.strip().split(".")[0])


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@app.exception_handler(ClientError)
async def client_error_handler(request: Request, exc: ClientError):
    return error_response(exc.status_code, exc.message)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok", "source": "fpl", "mode": "live"}


@app.get("/version")
def version_info():
    """Version information endpoint."""
    return {
        "name": APP_NAME,
        "version": APP_VERSION,
        "full": f"{APP_NAME} {APP_VERSION}"
    }


@app.get("/cache/stats")
def cache_stats(client: FPLClient = Depends(get_fpl_client)):
    """Get cache statistics."""
    return client.get_cache_stats()


# ===== PLAYERS =====

@app.get("/api/players")
def list_players(client: FPLClient = Depends(get_fpl_client)):
    """
    All players with stats, plus the team list for filtering.

    Returns {players: [...], teams: [{id, name}]} in upstream order.
    """
    try:
        bootstrap = client.get_bootstrap_static()
        players = players_to_view_models(bootstrap)
        teams = [
            {"id": t.get("id"), "name": t.get("name")}
            for t in bootstrap.get("teams") or []
        ]
        return {"players": [p.to_dict() for p in players], "teams": teams}
    except Exception as e:
        logger.error(f"Player list error: {e}", exc_info=True)
        return error_response(500, "Failed to fetch FPL data")


@app.get("/api/player/{player_id}")
def get_player(player_id: str, client: FPLClient = Depends(get_fpl_client)):
    """Single player by FPL element id."""
    parsed_id = parse_id(player_id)
    try:
        bootstrap = client.get_bootstrap_static()
        raw = None
        if parsed_id is not None:
            raw = next(
                (p for p in bootstrap.get("elements") or [] if p.get("id") == parsed_id),
                None,
            )
        if raw is None:
            raise NotFound("Player not found")

        player = project_player(
            raw,
            bootstrap.get("teams") or [],
            bootstrap.get("element_types") or [],
        )
        return player.to_dict()
    except ClientError:
        raise
    except Exception as e:
        logger.error(f"Player error for player_id={player_id}: {e}", exc_info=True)
        return error_response(500, "Failed to fetch player")


# ===== FIXTURES =====

@app.get("/api/team-fixtures/{team_id}")
def get_team_fixtures(team_id: str, client: FPLClient = Depends(get_fpl_client)):
    """
    Next fixtures for a team with difficulty and opponent strength.

    Opponent strengths are taken for the venue the opponent plays at.
    """
    parsed_id = parse_id(team_id)
    if parsed_id is None or parsed_id <= 0:
        raise InvalidInput("Invalid team id")

    try:
        # Independent upstream resources, fetched in parallel
        with ThreadPoolExecutor(max_workers=2) as executor:
            bootstrap_future = executor.submit(client.get_bootstrap_static)
            fixtures_future = executor.submit(client.get_future_fixtures)
            bootstrap = bootstrap_future.result()
            fixtures = fixtures_future.result()

        teams = index_teams_by_id(bootstrap.get("teams") or [])
        team = teams.get(parsed_id)
        if team is None:
            raise NotFound("Team not found")

        upcoming = select_upcoming_fixtures(
            fixtures or [],
            parsed_id,
            teams,
            limit=settings.fixtures_limit,
        )
        return {
            "team_id": parsed_id,
            "team_name": team.get("name"),
            "fixtures": [f.to_dict() for f in upcoming],
        }
    except ClientError:
        raise
    except Exception as e:
        logger.error(f"Team fixtures error for team_id={team_id}: {e}", exc_info=True)
        return error_response(500, "Failed to fetch team fixtures")


# Frontend assets, mounted last so the API routes take precedence
if settings.static_directory.is_dir():
    app.mount(
        "/",
        StaticFiles(directory=settings.static_directory, html=True),
        name="static",
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
