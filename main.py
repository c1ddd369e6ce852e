import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

ROOT = Path(__file__).resolve().parent
SRC_DIR = ROOT / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from core.config import AppConfig, load_config
from core.playback_controller import PlaybackController
from core.playlist import load_playlist
from core.state import AppState, Notify
from library.assets import AssetStore
from player.player import Player, SilentPlayer
from ui.main_window import MainWindow

logger = logging.getLogger("main")

def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

def init_app_state(config: AppConfig) -> AppState:
    app_state = AppState(config)

    app_state.assets = AssetStore(config.assets_dir)
    app_state.tracks = load_playlist(config.assets_dir)

    try:
        player = Player(tick_interval_ms=config.tick_interval_ms, volume=config.initial_volume)
    except Exception as e:
        logger.exception("Audio backend unavailable")
        player = None
        app_state.queued_notifications.append(
            Notify(message=f"Failed to initialize audio player: {e}", notify_type="error")
        )

    app_state.player = player
    app_state.controller = PlaybackController(
        app_state.tracks,
        player or SilentPlayer(),
        app_state.assets,
        initial_volume=config.initial_volume,
        shuffle_avoid_repeat=config.shuffle_avoid_repeat,
        single_repeat_loops=config.single_repeat_loops,
    )

    if player is not None:
        controller = app_state.controller
        player.positionTick.connect(controller.on_position_tick)
        player.durationReported.connect(controller.on_duration_reported)
        player.ended.connect(controller.on_media_ended)

    return app_state

def main() -> int:
    config = load_config()
    configure_logging(config)

    qt_app = QApplication(sys.argv)

    app_state = init_app_state(config)
    app_state.controller.load_track(0)

    main_window = MainWindow(app_state)
    main_window.show()

    return qt_app.exec()

if __name__ == "__main__":
    raise SystemExit(main())
