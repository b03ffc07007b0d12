"""Player card builders.

Each builder returns a (container, widget_dict) tuple. The container is a
QFrame with objectName "playerCard" that can be inserted into the grid.
The widget_dict maps logical names to sub-widgets for later updates.
"""

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout

ACTIVE_BORDER = "#22c55e"
IDLE_BORDER = "#d4d4d8"
OUT_COLOR = "#a1a1aa"

CARD_STYLESHEET = f"""
QFrame#playerCard {{
    border: 1px solid {IDLE_BORDER};
    border-radius: 8px;
    padding: 12px;
}}
QFrame#playerCard[active="true"] {{
    border: 2px solid {ACTIVE_BORDER};
}}
"""


def build_player_card(player, font_family="Segoe UI"):
    """Build one card from a snapshot player entry."""
    card = QFrame()
    card.setObjectName("playerCard")
    lay = QVBoxLayout(card)

    title = QLabel(f"Player {player['id']}")
    title_font = QFont(font_family, 14)
    title_font.setBold(True)
    title.setFont(title_font)
    title.setAlignment(Qt.AlignCenter)

    time_label = QLabel()
    time_font = QFont(font_family, 26)
    time_font.setBold(True)
    time_label.setFont(time_font)
    time_label.setAlignment(Qt.AlignCenter)

    lay.addWidget(title)
    lay.addWidget(time_label)

    widgets = {"card": card, "title": title, "time": time_label}
    update_player_card(widgets, player)
    return card, widgets


def update_player_card(widgets, player):
    """Refresh a card built by build_player_card with a newer snapshot entry."""
    widgets["time"].setText(player["display"])
    widgets["time"].setStyleSheet(f"color: {OUT_COLOR};" if player["is_out"] else "")

    card = widgets["card"]
    active = "true" if player["is_active"] else "false"
    if card.property("active") != active:
        card.setProperty("active", active)
        # Dynamic property selectors only apply after a re-polish
        card.style().unpolish(card)
        card.style().polish(card)
