"""
speech_manager.py
-----------------
Pronounces letters with the platform's text-to-speech engine (pyttsx3).

At most one utterance is in flight: every request stops the engine first,
so the newest letter always wins and nothing is queued. The engine runs
in external-loop mode and is pumped once per frame by update(), so
speaking never blocks the game loop.
"""

import pyttsx3

from letter_stairs.core.debug.debug_logger import DebugLogger
from letter_stairs.core.runtime.game_settings import Speech
from letter_stairs.core.services.event_manager import LetterLandedEvent


class SpeechManager:

    def __init__(self, event_manager=None, rate_scale=Speech.RATE_SCALE,
                 pitch_scale=Speech.PITCH_SCALE, volume=Speech.VOLUME):
        self.current_letter = None
        self.engine = None

        try:
            engine = pyttsx3.init()
            self._configure(engine, rate_scale, pitch_scale, volume)
            engine.startLoop(False)
            self.engine = engine
            DebugLogger.init_entry("SpeechManager")
        except (ImportError, OSError, RuntimeError) as e:
            DebugLogger.warn(f"Speech engine unavailable, speech disabled: {e}", category="audio")

        if event_manager is not None:
            event_manager.subscribe(LetterLandedEvent, self.on_letter_landed)

    @staticmethod
    def _configure(engine, rate_scale, pitch_scale, volume):
        """Scale rate and pitch relative to the engine's defaults."""
        engine.setProperty("rate", engine.getProperty("rate") * rate_scale)
        engine.setProperty("volume", volume)
        try:
            engine.setProperty("pitch", engine.getProperty("pitch") * pitch_scale)
        except KeyError:
            # Only some drivers (espeak) expose pitch
            DebugLogger.trace("Speech driver has no pitch control", category="audio")

    @property
    def enabled(self) -> bool:
        return self.engine is not None

    def on_letter_landed(self, event):
        self.speak(event.letter)

    def speak(self, letter) -> bool:
        """Cancel any utterance in flight, then say `letter`."""
        self.cancel()
        if not self.enabled or not letter or not letter.strip():
            return False

        self.engine.say(letter, letter)
        self.current_letter = letter
        DebugLogger.action(f"Speaking: {letter}", category="audio")
        return True

    def cancel(self):
        if self.enabled:
            self.engine.stop()
        self.current_letter = None

    def update(self):
        """Pump the engine's event loop; call once per frame."""
        if self.enabled:
            self.engine.iterate()

    def shutdown(self):
        if self.enabled:
            self.cancel()
            self.engine.endLoop()
            self.engine = None
