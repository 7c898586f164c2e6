from __future__ import annotations

import logging
from typing import Any, Callable, Dict

from twenty48.components.audio_cue import AudioCue
from twenty48.constants import CUE_SOUNDS, CUE_VOLUME
from twenty48.events.bus import EVENT_AUDIO_CUE, EventBus

logger = logging.getLogger(__name__)

CuePlayer = Callable[[AudioCue], None]


class AudioSystem:
    """Plays a short sound for each feedback cue without waiting for it to finish."""

    def __init__(
        self,
        event_bus: EventBus,
        *,
        player: CuePlayer | None = None,
        enabled: bool = True,
    ) -> None:
        self.event_bus = event_bus
        self.enabled = enabled
        self._player = player or self._play_with_arcade
        self._sounds: Dict[AudioCue, Any] = {}
        self._muted_cues: set[AudioCue] = set()
        self.event_bus.subscribe(EVENT_AUDIO_CUE, self.on_audio_cue)

    def on_audio_cue(self, sender, **kwargs) -> None:
        cue = kwargs.get("cue")
        if cue is None or not self.enabled:
            return
        try:
            cue = AudioCue(cue)
        except ValueError:
            return
        if cue in self._muted_cues:
            return
        self._player(cue)

    def _play_with_arcade(self, cue: AudioCue) -> None:
        # Local import keeps tests headless.
        import arcade

        sound = self._sounds.get(cue)
        if sound is None:
            try:
                sound = arcade.load_sound(CUE_SOUNDS[cue.value])
            except Exception as exc:
                # Audio backends fail in many ways (missing device, codec); drop this cue for the session.
                logger.warning("Muting cue %s, sound unavailable: %s", cue.value, exc)
                self._muted_cues.add(cue)
                return
            self._sounds[cue] = sound
        arcade.play_sound(sound, volume=CUE_VOLUME)
