"""Entry point for the 2048 puzzle.

Sets up the ECS world, event bus, systems, and Arcade window.
"""
import logging
import os

from arcade import Window, run, set_background_color

from twenty48.world import create_world
from twenty48.constants import GRID_SIZE, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from twenty48.events.bus import EVENT_KEY_PRESS_RAW, EventBus
from twenty48.rendering.board_renderer import BoardRenderSystem
from twenty48.systems.audio_system import AudioSystem
from twenty48.systems.board import BoardSystem
from twenty48.systems.game_flow_system import GameFlowSystem
from twenty48.systems.hiscore_system import HiScoreSystem
from twenty48.systems.input import InputSystem

LOG_LEVEL_ENV = "TWENTY48_LOG_LEVEL"


class Game2048Window(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus)

        # Collaborators subscribe before the board seeds its first tiles.
        self.hiscore_system = HiScoreSystem(self.world, self.event_bus)
        self.render_system = BoardRenderSystem(self.world, self.event_bus, self)
        self.audio_system = AudioSystem(self.event_bus)
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus, on_quit=self.close)
        self.input_system = InputSystem(self.event_bus)

        self.board_system = BoardSystem(self.world, self.event_bus, size=GRID_SIZE)

        set_background_color((250, 248, 239))

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS_RAW, symbol=symbol, modifiers=modifiers)

    def on_close(self):
        # Window close button: record the session before Arcade tears the window down.
        self.game_flow_system.end_session()
        super().on_close()


def main():
    logging.basicConfig(
        level=os.environ.get(LOG_LEVEL_ENV, "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    window = Game2048Window()
    run()

if __name__ == "__main__":
    main()
