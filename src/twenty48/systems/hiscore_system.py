from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from esper import World

from twenty48.components.hiscore import HiScore
from twenty48.events.bus import EVENT_HISCORE_UPDATED, EVENT_SESSION_END, EventBus

logger = logging.getLogger(__name__)

SAVE_PATH_ENV = "TWENTY48_SAVE_PATH"


class HiScoreSystem:
    """Loads the best score/tile once at startup and saves improvements at session end.

    Nothing in here may take the session down: unreadable or malformed files
    load as ``(0, 0)`` and failed writes are logged and dropped.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        save_path: Path | None = None,
        load_existing: bool = True,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._save_path = Path(save_path) if save_path is not None else self._default_save_path()
        self._hiscore_entity = self._ensure_hiscore_entity()

        self.event_bus.subscribe(EVENT_SESSION_END, self._on_session_end)

        if load_existing:
            self.load_hiscore()

    @staticmethod
    def _default_save_path() -> Path:
        override = os.environ.get(SAVE_PATH_ENV)
        if override:
            return Path(override)
        return Path(__file__).resolve().parents[3] / "data" / "hiscore.json"

    def _ensure_hiscore_entity(self) -> int:
        existing = list(self.world.get_component(HiScore))
        if existing:
            return existing[0][0]
        return self.world.create_entity(HiScore())

    def _hiscore(self) -> HiScore:
        return self.world.component_for_entity(self._hiscore_entity, HiScore)

    @property
    def save_path(self) -> Path:
        return self._save_path

    @property
    def best(self) -> tuple[int, int]:
        hiscore = self._hiscore()
        return hiscore.score, hiscore.max_tile

    def load_hiscore(self) -> None:
        hiscore = self._hiscore()
        hiscore.score, hiscore.max_tile = self._read()

    def _read(self) -> tuple[int, int]:
        try:
            with self._save_path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except FileNotFoundError:
            return 0, 0
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable hi-score file %s: %s", self._save_path, exc)
            return 0, 0
        try:
            score = payload["hi_score"]
            max_tile = payload["hi_max"]
        except (KeyError, TypeError) as exc:
            logger.warning("Ignoring malformed hi-score file %s: %s", self._save_path, exc)
            return 0, 0
        if not all(type(value) is int for value in (score, max_tile)):
            logger.warning("Ignoring non-integer hi-score values in %s", self._save_path)
            return 0, 0
        if score < 0 or max_tile < 0:
            logger.warning("Ignoring negative hi-score values in %s", self._save_path)
            return 0, 0
        return score, max_tile

    def record(self, score: int, max_tile: int) -> bool:
        """Save ``(score, max_tile)`` if either beats the stored best; returns whether it saved."""
        hiscore = self._hiscore()
        if score <= hiscore.score and max_tile <= hiscore.max_tile:
            return False
        new_score = max(score, hiscore.score)
        new_max = max(max_tile, hiscore.max_tile)
        if not self._write(new_score, new_max):
            return False
        hiscore.score = new_score
        hiscore.max_tile = new_max
        logger.info("New best: score=%d max=%d", new_score, new_max)
        self.event_bus.emit(EVENT_HISCORE_UPDATED, hi_score=new_score, hi_max=new_max)
        return True

    def _write(self, score: int, max_tile: int) -> bool:
        payload = {"hi_score": score, "hi_max": max_tile}
        try:
            self._save_path.parent.mkdir(parents=True, exist_ok=True)
            with self._save_path.open("w", encoding="utf-8") as handle:
                json.dump(payload, handle, indent=2)
        except OSError as exc:
            logger.warning("Could not save hi-score to %s: %s", self._save_path, exc)
            return False
        return True

    def _on_session_end(self, sender, **payload) -> None:
        score = payload.get("score")
        max_tile = payload.get("max_tile")
        if score is None or max_tile is None:
            return
        self.record(int(score), int(max_tile))
