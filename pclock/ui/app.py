import sys
from PySide6.QtCore import QTimer
from PySide6.QtWidgets import (
    QApplication,
    QCheckBox,
    QComboBox,
    QFormLayout,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)
from pclock.common.logger import log
from pclock.core import config
from pclock.core.engine import Command
from pclock.core.errors import InvalidConfig
from pclock.core.session import ClockSession
from pclock.ui.widgets import CARD_STYLESHEET, build_player_card, update_player_card
from pclock.util import format_clock, parse_time_input

TICK_INTERVAL_MS = 1000
GRID_COLUMNS = 3


# ---------------------------------------------------------------------------
# Main window
# ---------------------------------------------------------------------------

# Main window of the player clock. Setup form on top, command buttons, then one card per player.
class MainWindow(QMainWindow):

    def __init__(self, session=None):
        super().__init__()
        self.setWindowTitle("Player Timer")
        self.setStyleSheet(CARD_STYLESHEET)

        self.session = session or ClockSession()
        self._cards = {}  # player id -> widget dict

        # -- Build UI skeleton --
        central = QWidget()
        self.setCentralWidget(central)
        self._main_lay = QVBoxLayout(central)

        self._build_setup_form(config.load_settings())
        self._build_buttons()

        self._status = QLabel()
        self._main_lay.addWidget(self._status)

        self._grid_widget = QWidget()
        self._grid = QGridLayout(self._grid_widget)
        self._grid.setContentsMargins(0, 0, 0, 0)
        self._main_lay.addWidget(self._grid_widget)

        # -- Tick timer (1 s), only armed while the clock is running --
        self._timer = QTimer(self)
        self._timer.setInterval(TICK_INTERVAL_MS)
        self._timer.timeout.connect(self.session.tick)

        self.session.subscribe(self._render)
        self.session.on_timer_change(self._set_timer_armed)
        self._render(self.session.snapshot())

    # ------------------------------------------------------------------ #
    #  Layout                                                              #
    # ------------------------------------------------------------------ #

    def _build_setup_form(self, cfg):
        form = QFormLayout()

        self._count_box = QComboBox()
        for n in config.PLAYER_COUNTS:
            self._count_box.addItem(f"{n} Players", n)
        self._count_box.setCurrentIndex(self._count_box.findData(cfg.player_count))

        self._time_input = QLineEdit(format_clock(cfg.seconds_per_player))
        self._time_input.setPlaceholderText("Time per player (M:SS or seconds)")

        self._increment_box = QSpinBox()
        self._increment_box.setRange(0, 3600)
        self._increment_box.setSuffix(" s")
        self._increment_box.setValue(cfg.increment_seconds)

        self._elimination_box = QCheckBox("Eliminate players who run out of time")
        self._elimination_box.setChecked(cfg.elimination_mode)

        form.addRow("Number of Players", self._count_box)
        form.addRow("Time per Player", self._time_input)
        form.addRow("Increment Time", self._increment_box)
        form.addRow("", self._elimination_box)
        self._setup_widgets = (self._count_box, self._time_input, self._increment_box, self._elimination_box)
        self._main_lay.addLayout(form)

    def _build_buttons(self):
        row = QHBoxLayout()
        self._init_btn = QPushButton("Initialize Game")
        self._init_btn.clicked.connect(self._on_initialize)
        self._play_btn = QPushButton("Play")
        self._play_btn.clicked.connect(self.session.toggle)
        self._next_btn = QPushButton("Next Player")
        self._next_btn.clicked.connect(self.session.advance_turn)
        self._reset_btn = QPushButton("Reset")
        self._reset_btn.clicked.connect(self.session.reset)
        for btn in (self._init_btn, self._play_btn, self._next_btn, self._reset_btn):
            row.addWidget(btn)
        self._main_lay.addLayout(row)

    # ------------------------------------------------------------------ #
    #  Commands                                                            #
    # ------------------------------------------------------------------ #

    def _read_config(self):
        seconds = parse_time_input(self._time_input.text())
        if seconds is None:
            raise InvalidConfig(f"Couldn't read a time from '{self._time_input.text()}'")
        return config.ClockConfig(
            player_count=self._count_box.currentData(),
            seconds_per_player=seconds,
            increment_seconds=self._increment_box.value(),
            elimination_mode=self._elimination_box.isChecked(),
        )

    def _on_initialize(self):
        try:
            cfg = self._read_config()
            self.session.initialize(cfg)
        except InvalidConfig as e:
            log.warning(f"Rejected setup form: {e}")
            QMessageBox.warning(self, "Invalid Setup", str(e))
            return
        try:
            config.save_settings(cfg)
        except OSError:
            log.warning("Failed to remember setup form values.", exc_info=True)

    def _set_timer_armed(self, armed):
        if armed:
            self._timer.start()
        else:
            self._timer.stop()

    # ------------------------------------------------------------------ #
    #  Rendering                                                           #
    # ------------------------------------------------------------------ #

    def _rebuild_cards(self, players):
        while self._grid.count():
            item = self._grid.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()
        self._cards = {}
        for i, player in enumerate(players):
            card, widgets = build_player_card(player)
            self._grid.addWidget(card, i // GRID_COLUMNS, i % GRID_COLUMNS)
            self._cards[player["id"]] = widgets

    def _render(self, snap):
        players = snap["players"]
        if sorted(self._cards) != [p["id"] for p in players]:
            self._rebuild_cards(players)
        else:
            for player in players:
                update_player_card(self._cards[player["id"]], player)

        allowed = self.session.allowed_commands()
        initialized = snap["mode"] != "uninitialized"
        for widget in self._setup_widgets:
            widget.setEnabled(not initialized)
        self._init_btn.setVisible(not initialized)
        self._play_btn.setVisible(initialized)
        self._next_btn.setVisible(initialized)
        self._reset_btn.setVisible(initialized)

        running = snap["mode"] == "running"
        self._play_btn.setText("Pause" if running else "Play")
        self._play_btn.setEnabled(running or Command.START in allowed)
        self._next_btn.setEnabled(Command.ADVANCE_TURN in allowed)
        self._status.setText(self._status_text(snap))

    def _status_text(self, snap):
        mode = snap["mode"]
        if mode == "terminal":
            winner = self.session.state.winner
            return f"Game over, Player {winner.id} wins" if winner else "Game over"
        active = next((p for p in snap["players"] if p["is_active"]), None)
        if active is None:
            return ""
        if mode == "paused" and active["time_left_seconds"] == 0:
            return f"Player {active['id']} is out of time, press Next Player"
        return f"Player {active['id']} to move ({mode})"


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main():
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())
