# passcraft/gui.py
# PassCraft GUI: length slider, class checkboxes, strength blocks, copy with transient notification

import logging
import sys
from functools import partial

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QClipboard
from PySide6.QtWidgets import (
    QApplication, QWidget, QHBoxLayout, QVBoxLayout, QLabel,
    QLineEdit, QPushButton, QSlider, QCheckBox, QGroupBox, QGridLayout
)

from passcraft.config import load_config
from passcraft.notification import Notifier
from passcraft.score import TOTAL_BLOCKS
from passcraft.state import (
    Copy, DismissNotification, Generate, SetLength, ToggleClass, initial_state, reduce
)

CFG = load_config()

LABEL_COLORS = {"Weak": "#ff5252", "Medium": "#ffa500", "Strong": "#4caf50"}
EMPTY_BLOCK_COLOR = "#ffffff"

CLASS_CHECKBOXES = (
    ("include_uppercase", "Uppercase"),
    ("include_lowercase", "Lowercase"),
    ("include_numbers", "Numbers"),
    ("include_symbols", "Symbols"),
)


class _QtTimerHandle:
    def __init__(self, timer: QTimer):
        self.timer = timer

    def cancel(self) -> None:
        self.timer.stop()
        self.timer.deleteLater()


class QtScheduler:
    """Scheduler backed by single-shot QTimers owned by `parent`."""

    def __init__(self, parent=None):
        self.parent = parent

    def call_later(self, delay_ms, callback):
        timer = QTimer(self.parent)
        timer.setSingleShot(True)
        timer.timeout.connect(callback)
        timer.timeout.connect(timer.deleteLater)
        timer.start(delay_ms)
        return _QtTimerHandle(timer)


# ---------------- UI building helpers ----------------

def make_password_group():
    box = QGroupBox("Generated Password")
    layout = QHBoxLayout()
    box.setLayout(layout)

    txt_generated = QLineEdit()
    txt_generated.setReadOnly(True)
    btn_copy = QPushButton("Copy")
    btn_copy.setEnabled(False)
    lbl_notification = QLabel("")

    layout.addWidget(txt_generated, 1)
    layout.addWidget(btn_copy)
    layout.addWidget(lbl_notification)

    return {
        "widget": box,
        "txt_generated": txt_generated,
        "btn_copy": btn_copy,
        "lbl_notification": lbl_notification,
    }


def make_settings_group():
    box = QGroupBox("Password Settings")
    layout = QGridLayout()
    box.setLayout(layout)

    slider_len = QSlider(Qt.Horizontal)
    slider_len.setRange(CFG["min_length"], CFG["max_length"])
    slider_len.setValue(CFG["length"])
    lbl_len = QLabel(str(CFG["length"]))

    layout.addWidget(slider_len, 0, 0, 1, 3)
    layout.addWidget(lbl_len, 0, 3)

    checks = {}
    for col, (name, text) in enumerate(CLASS_CHECKBOXES):
        chk = QCheckBox(text)
        chk.setChecked(CFG[name])
        layout.addWidget(chk, 1, col)
        checks[name] = chk

    strength_row = QHBoxLayout()
    strength_row.addWidget(QLabel("STRENGTH"))
    blocks = []
    for _ in range(TOTAL_BLOCKS):
        block = QLabel()
        block.setFixedSize(14, 22)
        block.setStyleSheet(f"background-color: {EMPTY_BLOCK_COLOR}; border: 1px solid #999;")
        strength_row.addWidget(block)
        blocks.append(block)
    lbl_strength = QLabel("")
    strength_row.addWidget(lbl_strength)
    strength_row.addStretch(1)
    strength_box = QWidget()
    strength_box.setLayout(strength_row)
    strength_box.setVisible(False)
    layout.addWidget(strength_box, 2, 0, 1, 4)

    lbl_error = QLabel("")
    lbl_error.setStyleSheet("color: #ff5252;")
    layout.addWidget(lbl_error, 3, 0, 1, 4)

    btn_generate = QPushButton("Generate Password")
    layout.addWidget(btn_generate, 4, 0, 1, 4)

    return {
        "widget": box,
        "slider_len": slider_len,
        "lbl_len": lbl_len,
        "checks": checks,
        "strength_box": strength_box,
        "blocks": blocks,
        "lbl_strength": lbl_strength,
        "lbl_error": lbl_error,
        "btn_generate": btn_generate,
    }


class PassCraftGUI(QWidget):
    def __init__(self, policy=None):
        super().__init__()
        self.setWindowTitle("PassCraft — Password Generator")
        self.setMinimumSize(560, 260)

        self.state = initial_state(policy or CFG["strength_policy"])
        self.notifier = Notifier(
            QtScheduler(self),
            timeout_ms=CFG["notification_timeout_ms"],
            on_change=self.on_notification_changed,
        )

        # build UI
        main = QVBoxLayout()
        self.setLayout(main)

        pw = make_password_group()
        settings = make_settings_group()
        main.addWidget(pw["widget"])
        main.addWidget(settings["widget"])

        # Wire up controls
        settings["slider_len"].valueChanged.connect(self.on_length_changed)
        for name, chk in settings["checks"].items():
            chk.toggled.connect(partial(self.on_class_toggled, name))
        settings["btn_generate"].clicked.connect(self.on_generate_click)
        pw["btn_copy"].clicked.connect(self.on_copy_generated)

        # store references
        self.pw = pw
        self.settings = settings

    def dispatch(self, action):
        self.state = reduce(self.state, action)
        self.render()

    # ----------------- Actions -----------------
    def on_length_changed(self, value: int):
        self.dispatch(SetLength(value))

    def on_class_toggled(self, name: str, _checked: bool):
        self.dispatch(ToggleClass(name))

    def on_generate_click(self):
        self.dispatch(Generate())

    def on_copy_generated(self):
        self.dispatch(Copy(write=self.write_clipboard))
        if self.state.notification:
            self.notifier.show(self.state.notification)

    def on_notification_changed(self, message):
        if message is None and self.state.notification is not None:
            self.state = reduce(self.state, DismissNotification())
        self.pw["lbl_notification"].setText(message or "")

    # ----------------- Clipboard -----------------
    @staticmethod
    def write_clipboard(text: str):
        clipboard: QClipboard = QApplication.clipboard()
        if clipboard is None:
            raise RuntimeError("no clipboard available")
        clipboard.setText(text, mode=QClipboard.Clipboard)

    # ----------------- Rendering -----------------
    def render(self):
        st = self.state
        self.settings["lbl_len"].setText(str(st.config.length))
        self.settings["btn_generate"].setEnabled(st.can_generate)
        if not st.can_generate:
            self.settings["lbl_error"].setText("Select at least one character set.")
        else:
            self.settings["lbl_error"].setText(st.error or "")

        self.pw["txt_generated"].setText(st.password)
        self.pw["btn_copy"].setEnabled(bool(st.password))

        strength = st.strength
        self.settings["strength_box"].setVisible(strength is not None)
        if strength is not None:
            color = LABEL_COLORS.get(strength.label, "#4caf50")
            for i, block in enumerate(self.settings["blocks"]):
                fill = color if i < strength.blocks else EMPTY_BLOCK_COLOR
                block.setStyleSheet(f"background-color: {fill}; border: 1px solid #999;")
            self.settings["lbl_strength"].setText(strength.label)

    def closeEvent(self, event):
        self.notifier.close()
        super().closeEvent(event)


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    app = QApplication(sys.argv)
    gui = PassCraftGUI()
    gui.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
