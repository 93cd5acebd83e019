"""
Optional narrative provider for Sideline Saga.

The deterministic engine always computes the next state.  When a remote
generation service is configured, its payload may replace the narrative
text of that turn and nothing else; records, offers and choices stay the
engine's.  Failures are retried with exponential backoff and then degrade
to an offline turn that carries the local narrative.

Performance features:
- ResponseCache keyed on (phase, record, action, prestige, role) so repeated
  situations skip the network round trip
- build_minimal_context() keeps the prompt payload small

Usage:
    from sideline.provider import NarrativeService, HttpNarrativeProvider

    service = NarrativeService(HttpNarrativeProvider(url, api_key))
    turn = service.next_turn(prior, "advance", "Continue")
"""

from __future__ import annotations

import json
import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Protocol, TypeVar

import requests

from sideline.config import SidelineConfig
from sideline.errors import ProviderError
from sideline.models import CAROUSEL, TurnLog
from sideline.templates import has_unreplaced_tokens
from sideline.turn_engine import advance_turn

_log = logging.getLogger("sideline.provider")

T = TypeVar("T")

LOCAL_ONLY_ACTIONS = ("retry_connection", "retry_init")
OFFLINE_SUFFIX = " (Offline)"
OFFLINE_NOTE = "The generation service was unreachable. This turn was written from the local playbook."

# Fields a provider payload may override.  Everything else is engine state.
NARRATIVE_FIELDS = (
    "media_headline", "media_buzz", "staff_notes", "scene_title",
    "scene_description", "resolution", "ticker",
)

NARRATIVE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "media_headline": {"type": "string"},
        "media_buzz": {"type": "array", "items": {"type": "string"}},
        "staff_notes": {"type": "array", "items": {"type": "string"}},
        "scene_title": {"type": "string"},
        "scene_description": {"type": "string"},
        "resolution": {"type": "string"},
        "ticker": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["media_headline", "scene_description"],
}


class NarrativeProvider(Protocol):
    def generate(self, prompt: str, schema: Dict[str, Any]) -> Dict[str, Any]:
        ...


# ---------------------------------------------------------------------------
# HTTP provider
# ---------------------------------------------------------------------------

class HttpNarrativeProvider:
    """POSTs {prompt, schema} to a generation endpoint and returns its JSON object."""

    def __init__(self, url: str, api_key: str = "", timeout: float = 30.0,
                 session: Optional[requests.Session] = None):
        self.url = url
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def generate(self, prompt: str, schema: Dict[str, Any]) -> Dict[str, Any]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            resp = self.session.post(self.url, json={"prompt": prompt, "schema": schema},
                                     headers=headers, timeout=self.timeout)
        except requests.exceptions.ConnectionError:
            raise ProviderError(f"Cannot reach narrative provider at {self.url}",
                                retryable=True, status_code=503)
        except requests.exceptions.Timeout:
            raise ProviderError(f"Narrative provider timed out after {self.timeout}s",
                                retryable=True, status_code=504)
        except requests.exceptions.RequestException as e:
            raise ProviderError(f"Narrative provider request failed: {e}", retryable=True)

        if resp.status_code == 429 or resp.status_code >= 500:
            raise ProviderError(f"Narrative provider busy ({resp.status_code})",
                                retryable=True, status_code=resp.status_code)
        if resp.status_code >= 400:
            raise ProviderError(f"Narrative provider rejected the request ({resp.status_code})",
                                retryable=False, status_code=resp.status_code)
        try:
            payload = resp.json()
        except ValueError:
            raise ProviderError("Narrative provider returned malformed JSON", retryable=False)
        if not isinstance(payload, dict):
            raise ProviderError("Narrative provider returned a non-object payload", retryable=False)
        return payload


def with_retry(
    fn: Callable[[], T],
    retries: int = 3,
    delay: float = 1.0,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """
    Call ``fn`` up to ``retries + 1`` times.  Only retryable ProviderErrors
    are retried; the wait doubles after each failure.  The last error is
    re-raised once attempts run out.
    """
    wait = delay
    for attempt in range(retries + 1):
        try:
            return fn()
        except ProviderError as e:
            if not e.retryable or attempt == retries:
                raise
            _log.warning(f"Provider attempt {attempt + 1}/{retries + 1} failed: {e}; "
                         f"retrying in {wait:.1f}s")
            sleep(wait)
            wait *= 2
    raise ProviderError("retry loop exited without a result")


# ---------------------------------------------------------------------------
# Response cache
# ---------------------------------------------------------------------------

@dataclass
class CacheEntry:
    payload: Dict[str, Any]
    timestamp: float
    hits: int = 0


_ROLE_KEYS = {"Head Coach": "hc"}


def cache_key(phase: str, record: str, action_id: str, prestige: str, role: str) -> str:
    if role in _ROLE_KEYS:
        role_key = _ROLE_KEYS[role]
    elif "Coordinator" in role:
        role_key = "coord"
    else:
        role_key = "staff"
    return f"{phase}|{record}|{action_id}|{prestige}|{role_key}"


class ResponseCache:
    """Bounded TTL cache for provider payloads.  Owned by one NarrativeService."""

    def __init__(self, max_size: int = 50, ttl: float = 86400,
                 clock: Callable[[], float] = time.time):
        self.max_size = max_size
        self.ttl = ttl
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: Dict[str, CacheEntry] = {}
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None or self._clock() - entry.timestamp >= self.ttl:
                self._entries.pop(key, None)
                self._misses += 1
                return None
            entry.hits += 1
            self._hits += 1
            _log.debug(f"cache hit {key} (hits={entry.hits})")
            return dict(entry.payload)

    def put(self, key: str, payload: Dict[str, Any]):
        with self._lock:
            self._entries[key] = CacheEntry(dict(payload), self._clock())
            self._prune(key)
        _log.debug(f"cache store {key}")

    def _prune(self, fresh: str):
        """Drop expired entries, then keep the most-hit ones.  ``fresh`` always stays."""
        now = self._clock()
        self._entries = {k: e for k, e in self._entries.items() if now - e.timestamp < self.ttl}
        if len(self._entries) > self.max_size:
            others = sorted(((k, e) for k, e in self._entries.items() if k != fresh),
                            key=lambda kv: (kv[1].hits, kv[1].timestamp), reverse=True)
            keep = others[:self.max_size - 1]
            keep.append((fresh, self._entries[fresh]))
            self._entries = dict(keep)

    def stats(self) -> dict:
        with self._lock:
            return {
                "size": len(self._entries),
                "max_size": self.max_size,
                "hits": self._hits,
                "misses": self._misses,
            }

    def clear(self):
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def __len__(self) -> int:
        return len(self._entries)


# ---------------------------------------------------------------------------
# Prompt context
# ---------------------------------------------------------------------------

def build_minimal_context(turn: TurnLog) -> Dict[str, Any]:
    """Compact view of a turn for the provider prompt."""
    h = turn.header
    ctx = {
        "d": h.date,
        "t": h.team,
        "r": h.role,
        "rec": h.season_record,
        "ph": h.timeline_phase,
        "sec": h.job_security,
        "fan": h.fan_sentiment,
        "pres": h.stats.prestige,
        "threads": h.open_threads[:3],
        "tags": h.reputation_tags[:3],
    }
    if h.timeline_phase == CAROUSEL and turn.job_offers:
        ctx["offers"] = [{"t": o.team, "s": o.status} for o in turn.job_offers]
    return ctx


def needs_provider_narrative(action_id: str) -> bool:
    return action_id not in LOCAL_ONLY_ACTIONS


def _build_prompt(turn: TurnLog, action_text: str, custom_context: Optional[str]) -> str:
    lines = [
        "Write the next turn of a football coaching career.",
        f"State: {json.dumps(build_minimal_context(turn), separators=(',', ':'))}",
    ]
    if turn.resolution:
        lines.append(f"What just happened: {turn.resolution}")
    if action_text:
        lines.append(f"Coach's action: {action_text}")
    if custom_context:
        lines.append(f"Coach's note: {custom_context}")
    return "\n".join(lines)


def apply_payload(turn: TurnLog, payload: Dict[str, Any]) -> TurnLog:
    """Copy of ``turn`` with the narrative fields the payload supplies cleanly."""
    out = turn.copy()
    for name in NARRATIVE_FIELDS:
        value = payload.get(name)
        if value is None:
            continue
        if isinstance(getattr(out, name), list):
            if isinstance(value, list) and all(
                    isinstance(v, str) and not has_unreplaced_tokens(v) for v in value):
                setattr(out, name, list(value))
        elif isinstance(value, str) and value.strip() and not has_unreplaced_tokens(value):
            setattr(out, name, value)
    return out


def offline_turn(turn: TurnLog) -> TurnLog:
    """Engine state with its local narrative, labelled as degraded."""
    out = turn.copy()
    if not out.header.date.endswith(OFFLINE_SUFFIX):
        out.header.date += OFFLINE_SUFFIX
    out.offline = True
    out.staff_notes = out.staff_notes + [OFFLINE_NOTE]
    return out


def _strip_offline(turn: TurnLog) -> TurnLog:
    if not turn.offline and not turn.header.date.endswith(OFFLINE_SUFFIX):
        return turn
    clean = turn.copy()
    clean.header.date = clean.header.date.replace(OFFLINE_SUFFIX, "")
    clean.offline = False
    return clean


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------

class NarrativeService:
    """Engine plus optional provider.  ``next_turn`` never raises a ProviderError."""

    def __init__(
        self,
        provider: Optional[NarrativeProvider] = None,
        cache: Optional[ResponseCache] = None,
        retries: int = 3,
        delay: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.provider = provider
        self.cache = cache if cache is not None else ResponseCache()
        self.retries = retries
        self.delay = delay
        self.sleep = sleep

    @classmethod
    def from_config(cls, config: SidelineConfig) -> "NarrativeService":
        provider = None
        if config.provider_enabled:
            provider = HttpNarrativeProvider(config.provider_url, config.provider_key,
                                             config.provider_timeout)
        return cls(
            provider=provider,
            cache=ResponseCache(config.cache_size, config.cache_ttl),
            retries=config.provider_retries,
            delay=config.provider_backoff,
        )

    def next_turn(
        self,
        prior: TurnLog,
        action_id: str,
        action_text: str = "",
        custom_context: Optional[str] = None,
    ) -> TurnLog:
        turn = advance_turn(_strip_offline(prior), action_id, action_text, custom_context)
        if self.provider is None or not needs_provider_narrative(action_id):
            return turn

        h = turn.header
        key = None
        if not custom_context:
            key = cache_key(h.timeline_phase, h.season_record, action_id, h.stats.prestige, h.role)
            cached = self.cache.get(key)
            if cached is not None:
                return apply_payload(turn, cached)

        prompt = _build_prompt(turn, action_text, custom_context)
        try:
            payload = with_retry(lambda: self.provider.generate(prompt, NARRATIVE_SCHEMA),
                                 retries=self.retries, delay=self.delay, sleep=self.sleep)
        except ProviderError as e:
            _log.warning(f"Narrative provider unavailable, serving offline turn {turn.turn_id}: {e}")
            return offline_turn(turn)

        if key is not None:
            self.cache.put(key, payload)
        return apply_payload(turn, payload)

    def cache_stats(self) -> dict:
        return self.cache.stats()