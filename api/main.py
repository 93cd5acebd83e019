"""
Sideline Saga API
FastAPI wrapper around the Sideline Saga career engine
"""

import sys
import os
import uuid
import time
import random
import threading
from typing import Dict, List, Optional
from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response
from pydantic import BaseModel

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))
from sideline import persistence
from sideline.config import load_config
from sideline.era import ARCHETYPES, ARCHETYPES_BY_ID
from sideline.errors import PersistenceError, SaveNotFoundError, SidelineError
from sideline.export import career_history_csv_text
from sideline.models import CAROUSEL, TurnLog
from sideline.offers import find_offer
from sideline.provider import NarrativeService
from sideline.teams import ALL_TEAMS, LEVELS, resolve_team, teams_by_level
from sideline.turn_engine import (
    ACCEPT_PREFIX,
    DECLINE_PREFIX,
    NEGOTIATE_PREFIX,
    new_career,
)


app = FastAPI(title="Sideline Saga API", version="1.0.0")

config = load_config()
persistence.set_db_path(config.db_path)

service = NarrativeService.from_config(config)

careers: Dict[str, dict] = {}


@app.get("/api/health")
def health_check():
    """Health check endpoint for deployment monitoring."""
    return {
        "status": "ok",
        "teams": len(ALL_TEAMS),
        "careers_active": len(careers),
        "provider": service.provider is not None,
    }


class CreateCareerRequest(BaseModel):
    seed: Optional[int] = None
    coach_name: str = "Jacob Rhinehart"
    start_year: int = 1995
    archetype: Optional[str] = None


class TurnRequest(BaseModel):
    action_id: str
    action_text: str = ""
    custom_context: Optional[str] = None


class SaveRequest(BaseModel):
    name: str


# ──────────────────────────────────────────────
# HELPERS
# ──────────────────────────────────────────────

def _get_career(career_id: str) -> dict:
    if career_id not in careers:
        raise HTTPException(status_code=404, detail="Career not found")
    return careers[career_id]


def _register(history: List[TurnLog]) -> str:
    career_id = str(uuid.uuid4())
    careers[career_id] = {
        "history": history,
        "lock": threading.Lock(),
        "created_at": time.time(),
    }
    return career_id


def _current(career: dict) -> TurnLog:
    return career["history"][-1]


def _serialize_career(career_id: str, career: dict) -> dict:
    return {
        "career_id": career_id,
        "turn": _current(career).to_dict(),
        "history_length": len(career["history"]),
        "created_at": career["created_at"],
    }


def _acquire(career: dict) -> threading.Lock:
    lock: threading.Lock = career["lock"]
    if not lock.acquire(blocking=False):
        raise HTTPException(status_code=409, detail="A turn is already in progress for this career")
    return lock


def _run_turn(career_id: str, action_id: str, action_text: str = "",
              custom_context: Optional[str] = None) -> dict:
    career = _get_career(career_id)
    lock = _acquire(career)
    try:
        prior = _current(career)
        try:
            turn = service.next_turn(prior, action_id, action_text, custom_context)
        except SidelineError as e:
            raise HTTPException(status_code=500, detail=f"Engine error: {e}")
        career["history"].append(turn)
    finally:
        lock.release()
    return _serialize_career(career_id, career)


def _history_metadata(career: dict) -> dict:
    return {"history": persistence.serialize_career(career["history"])}


# ──────────────────────────────────────────────
# REFERENCE DATA
# ──────────────────────────────────────────────

@app.get("/teams")
def list_teams(level: Optional[str] = Query(None)):
    if level is not None and level not in LEVELS:
        raise HTTPException(status_code=400, detail=f"Unknown level '{level}'. Valid: {list(LEVELS)}")
    teams = teams_by_level(level) if level else list(ALL_TEAMS)
    return {"teams": [t.to_dict() for t in teams], "count": len(teams)}


@app.get("/teams/lookup")
def lookup_team(name: str = Query(..., min_length=1)):
    return resolve_team(name).to_dict()


@app.get("/archetypes")
def list_archetypes():
    return {"archetypes": ARCHETYPES}


# ──────────────────────────────────────────────
# CAREERS
# ──────────────────────────────────────────────

@app.post("/careers")
def create_career(req: CreateCareerRequest):
    if req.archetype is not None and req.archetype not in ARCHETYPES_BY_ID:
        raise HTTPException(status_code=400, detail=f"Unknown archetype '{req.archetype}'")
    seed = req.seed if req.seed is not None else random.randint(1, 2**31 - 1)
    turn = new_career(seed, req.coach_name, req.start_year, req.archetype)
    career_id = _register([turn])
    return _serialize_career(career_id, careers[career_id])


@app.get("/careers/{career_id}")
def get_career(career_id: str):
    return _serialize_career(career_id, _get_career(career_id))


@app.get("/careers/{career_id}/history")
def get_career_history(career_id: str):
    career = _get_career(career_id)
    return {"turns": [t.to_dict() for t in career["history"]]}


@app.delete("/careers/{career_id}")
def delete_career(career_id: str):
    _get_career(career_id)
    del careers[career_id]
    return {"deleted": True}


@app.post("/careers/{career_id}/turn")
def take_turn(career_id: str, req: TurnRequest):
    if not req.action_id.strip():
        raise HTTPException(status_code=400, detail="action_id is required")
    return _run_turn(career_id, req.action_id, req.action_text, req.custom_context)


_OFFER_VERBS = {
    "accept": ACCEPT_PREFIX,
    "decline": DECLINE_PREFIX,
    "negotiate": NEGOTIATE_PREFIX,
}


@app.post("/careers/{career_id}/offers/{offer_id}/{verb}")
def offer_action(career_id: str, offer_id: str, verb: str):
    if verb not in _OFFER_VERBS:
        raise HTTPException(status_code=400, detail=f"Unknown offer action '{verb}'")
    current = _current(_get_career(career_id))
    if current.header.timeline_phase != CAROUSEL:
        raise HTTPException(status_code=400, detail="Offers can only be answered during the carousel")
    offer = find_offer(current.job_offers, offer_id)
    if offer is None:
        raise HTTPException(status_code=404, detail=f"Offer '{offer_id}' not found")
    if not offer.live:
        raise HTTPException(status_code=400, detail=f"The {offer.team} have rescinded this offer")
    return _run_turn(career_id, f"{_OFFER_VERBS[verb]}{offer_id}",
                     f"{verb.capitalize()} the {offer.team} offer")


@app.get("/careers/{career_id}/export.csv")
def export_career(career_id: str):
    career = _get_career(career_id)
    text = career_history_csv_text(career["history"])
    return Response(
        content=text,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="career_{career_id[:8]}.csv"'},
    )


# ──────────────────────────────────────────────
# SAVES
# ──────────────────────────────────────────────

@app.post("/careers/{career_id}/save")
def save_career(career_id: str, req: SaveRequest):
    career = _get_career(career_id)
    lock = _acquire(career)
    try:
        save_id = persistence.save(req.name, _current(career).header, _history_metadata(career))
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))
    finally:
        lock.release()
    return {"save_id": save_id, "name": req.name}


@app.post("/careers/{career_id}/quicksave")
def quick_save_career(career_id: str):
    career = _get_career(career_id)
    lock = _acquire(career)
    try:
        save_id = persistence.quick_save(_current(career).header, _history_metadata(career))
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))
    finally:
        lock.release()
    return {"save_id": save_id, "name": persistence.QUICKSAVE_NAME}


@app.get("/saves")
def list_saves():
    try:
        return {"saves": persistence.list_saves()}
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))


def _load_record(save_id: str) -> persistence.SaveRecord:
    try:
        record = persistence.load(save_id)
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))
    if record is None:
        raise HTTPException(status_code=404, detail="Save not found")
    return record


@app.get("/saves/{save_id}")
def get_save(save_id: str):
    record = _load_record(save_id)
    turns = record.metadata.get("history", {}).get("turn_count", 0)
    return {
        "save_id": record.save_id,
        "name": record.name,
        "timestamp": record.timestamp,
        "schema_version": record.schema_version,
        "header": record.header.to_dict(),
        "turn_count": turns,
    }


@app.delete("/saves/{save_id}")
def delete_save(save_id: str):
    try:
        persistence.delete(save_id)
    except SaveNotFoundError:
        raise HTTPException(status_code=404, detail="Save not found")
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"deleted": True}


@app.post("/saves/{save_id}/load")
def load_save(save_id: str):
    record = _load_record(save_id)
    try:
        history = persistence.deserialize_career(record.metadata.get("history", {}))
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))
    if not history:
        raise HTTPException(status_code=400, detail="Save has no turn history to resume")
    career_id = _register(history)
    return _serialize_career(career_id, careers[career_id])
