import logging
import sys
from typing import Dict, List, Optional, Sequence, Tuple

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPainter, QPen
from PyQt6.QtWidgets import (
    QApplication, QMainWindow, QWidget,
    QHBoxLayout, QVBoxLayout, QGridLayout,
    QLabel, QLineEdit, QPushButton, QCheckBox, QComboBox,
    QGraphicsView, QGraphicsScene, QGraphicsRectItem, QGraphicsSimpleTextItem,
    QMessageBox, QFrame, QSplitter, QTabWidget,
    QTableWidget, QTableWidgetItem, QHeaderView, QTextBrowser
)

from .config import EPSILON, PALETTE, REJECT_SINK_LABEL, STACK_BOTTOM
from .definition import DefinitionError, PDADefinition, TransitionKey, state_label
from .engine import Configuration, Verdict, run, tokenize
from .playback import Mode, PlaybackController

logger = logging.getLogger(__name__)

EMPTY_CHOICE = f"{EPSILON} (empty)"


# ----------------------------- Utilities -----------------------------

def html_escape(s: str) -> str:
    return (s.replace("&", "&amp;")
             .replace("<", "&lt;")
             .replace(">", "&gt;"))


def clear_layout(layout):
    while layout.count():
        item = layout.takeAt(0)
        w = item.widget()
        if w is not None:
            w.deleteLater()


# ----------------------------- Tape View -----------------------------

class TapeView(QGraphicsView):
    """Input cells; consumed symbols are greyed and the head cell is framed."""
    def __init__(self, palette):
        super().__init__()
        self.p = palette

        self.scene = QGraphicsScene(self)
        self.setScene(self.scene)
        self.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setMinimumHeight(80)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        self.cell_w = 40
        self.cell_h = 40
        self.cell_gap = 2
        self.base_x = 10
        self.base_y = 14

        self.font_cell = QFont(palette["mono_font"], 12)
        self.font_cell.setBold(True)

        self.rects: List[QGraphicsRectItem] = []

    def clear(self):
        self.scene.clear()
        self.rects = []

    def render_tape(self, symbols: Sequence[str], consumed: int, done: bool = False, accepted: bool = False):
        self.clear()
        cells = list(symbols) + ["⊔"]
        head = min(consumed, len(cells) - 1)

        for idx, sym in enumerate(cells):
            x = self.base_x + idx * (self.cell_w + self.cell_gap)

            rect = QGraphicsRectItem(x, self.base_y, self.cell_w, self.cell_h)
            pen = QPen(QColor(self.p["border"]))
            pen.setWidth(2)
            fill = QColor(self.p["card_bg"])
            if idx == head:
                if done:
                    fill = QColor(self.p["ok_fill"] if accepted else self.p["bad_fill"])
                    pen = QPen(QColor(self.p["ok_border"] if accepted else self.p["bad_border"]))
                else:
                    fill = QColor(self.p["active_fill"])
                    pen = QPen(QColor(self.p["active_border"]))
                pen.setWidth(3)
            rect.setPen(pen)
            rect.setBrush(QBrush(fill))
            self.scene.addItem(rect)

            text = QGraphicsSimpleTextItem(sym)
            text.setFont(self.font_cell)
            muted = idx < consumed and idx < len(cells) - 1
            text.setBrush(QBrush(QColor(self.p["muted"] if muted else self.p["text"])))
            br = text.boundingRect()
            text.setPos(x + (self.cell_w - br.width()) / 2, self.base_y + (self.cell_h - br.height()) / 2)
            self.scene.addItem(text)

            self.rects.append(rect)

        width = max(600, self.base_x + len(cells) * (self.cell_w + self.cell_gap) + 20)
        self.scene.setSceneRect(0, 0, width, self.cell_h + 2 * self.base_y)
        self.ensureVisible(self.rects[head], 80, 10)


# ----------------------------- Stack View -----------------------------

class StackView(QGraphicsView):
    def __init__(self, palette):
        super().__init__()
        self.p = palette

        self.scene = QGraphicsScene(self)
        self.setScene(self.scene)
        self.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setMinimumWidth(120)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        self.cell_w = 92
        self.cell_h = 28
        self.cell_gap = 6
        self.base_x = 10
        self.margin = 12

        self.font_cell = QFont(palette["mono_font"], 11)
        self.font_cell.setBold(True)

    def render_stack(self, stack: Sequence[str]):
        self.scene.clear()

        n = len(stack)
        h = max(240, self.margin * 2 + max(1, n) * self.cell_h + max(0, n - 1) * self.cell_gap)
        self.scene.setSceneRect(0, 0, 120, h)
        bottom_y = h - self.margin - self.cell_h

        top = None
        for idx, sym in enumerate(stack):
            y = bottom_y - idx * (self.cell_h + self.cell_gap)

            rect = QGraphicsRectItem(self.base_x, y, self.cell_w, self.cell_h)
            pen = QPen(QColor(self.p["active_border"] if idx == n - 1 else self.p["stack_border"]))
            pen.setWidth(2 if idx == n - 1 else 1)
            rect.setPen(pen)
            bg = self.p["card_bg_2"] if sym == STACK_BOTTOM else self.p["card_bg"]
            rect.setBrush(QBrush(QColor(bg)))
            self.scene.addItem(rect)

            text = QGraphicsSimpleTextItem(sym)
            text.setFont(self.font_cell)
            text.setBrush(QBrush(QColor(self.p["text"])))
            br = text.boundingRect()
            text.setPos(self.base_x + (self.cell_w - br.width()) / 2, y + (self.cell_h - br.height()) / 2)
            self.scene.addItem(text)
            top = rect

        if top is not None:
            self.ensureVisible(top, 10, self.margin)


# ----------------------------- Main Window -----------------------------

class PDAWindow(QMainWindow):
    def __init__(self, definition: Optional[PDADefinition] = None,
                 controller: Optional[PlaybackController] = None):
        super().__init__()
        self.p = PALETTE

        self.setWindowTitle("Pushdown Automata Simulator")
        self.resize(980, 680)

        self.definition = definition or PDADefinition()
        self.controller = controller or PlaybackController(parent=self)

        self.tape_symbols: List[str] = []
        self._last_cursor = 0
        self.instruction_combos: Dict[Tuple[TransitionKey, str], QComboBox] = {}

        self._build_ui()

        self.controller.changed.connect(self._sync_ui)
        self.controller.configurationShown.connect(self._show_configuration)
        self.controller.verdictShown.connect(self._show_verdict)

        self._definition_changed()
        self._sync_ui()

    def _card(self, title: str, content: QWidget) -> QWidget:
        box = QWidget()
        box.setObjectName("Card")
        lay = QVBoxLayout(box)
        lay.setContentsMargins(10, 8, 10, 10)
        lay.setSpacing(6)

        lbl = QLabel(title)
        lbl.setObjectName("CardTitle")
        lay.addWidget(lbl)
        lay.addWidget(content)
        return box

    # ----------------------------- layout -----------------------------

    def _build_ui(self):
        root = QWidget()
        self.setCentralWidget(root)

        main = QVBoxLayout(root)
        main.setContentsMargins(12, 12, 12, 12)
        main.setSpacing(10)

        title = QLabel("Pushdown Automata Simulator")
        title.setObjectName("HeaderTitle")
        sub = QLabel("Define the PDA parameters and run the simulation.")
        sub.setObjectName("HeaderSub")
        main.addWidget(title)
        main.addWidget(sub)

        self.tabs = QTabWidget()
        self.tabs.addTab(self._build_parameters_tab(), "Parameters")
        self.tabs.addTab(self._build_simulation_tab(), "Simulation")
        main.addWidget(self.tabs, stretch=1)

        self._apply_style()

    def _build_parameters_tab(self) -> QWidget:
        page = QWidget()
        lay = QVBoxLayout(page)
        lay.setSpacing(10)

        # alphabet
        alpha_box = QWidget()
        al = QVBoxLayout(alpha_box)
        al.setContentsMargins(0, 0, 0, 0)
        row = QHBoxLayout()
        self.symbol_inp = QLineEdit()
        self.symbol_inp.setPlaceholderText("Enter a symbol")
        self.btn_add_symbol = QPushButton("Add")
        row.addWidget(self.symbol_inp, stretch=1)
        row.addWidget(self.btn_add_symbol)
        al.addLayout(row)
        self.chips = QHBoxLayout()
        self.chips.setAlignment(Qt.AlignmentFlag.AlignLeft)
        al.addLayout(self.chips)
        hint = QLabel("Add the alphabet symbols one by one; click a symbol to remove it.")
        hint.setObjectName("Hint")
        al.addWidget(hint)
        lay.addWidget(self._card("Alphabet", alpha_box))

        # states
        states_box = QWidget()
        sl = QVBoxLayout(states_box)
        sl.setContentsMargins(0, 0, 0, 0)
        row = QHBoxLayout()
        self.btn_remove_state = QPushButton("−")
        self.btn_add_state = QPushButton("+")
        self.state_count = QLabel("1")
        self.state_count.setObjectName("StateCount")
        for b in (self.btn_remove_state, self.btn_add_state):
            b.setFixedWidth(40)
        row.addWidget(self.btn_remove_state)
        row.addWidget(self.state_count)
        row.addWidget(self.btn_add_state)
        row.addStretch(1)
        sl.addLayout(row)
        self.state_buttons = QHBoxLayout()
        self.state_buttons.setAlignment(Qt.AlignmentFlag.AlignLeft)
        sl.addLayout(self.state_buttons)
        hint = QLabel(f"Click a state to mark it as accepting. {REJECT_SINK_LABEL} is the default reject state.")
        hint.setObjectName("Hint")
        sl.addWidget(hint)
        lay.addWidget(self._card("States", states_box))

        # instructions
        instr_box = QWidget()
        il = QVBoxLayout(instr_box)
        il.setContentsMargins(0, 0, 0, 0)
        row = QHBoxLayout()
        self.btn_generate = QPushButton("Generate keys")
        self.btn_reset_instr = QPushButton("Reset instructions")
        row.addWidget(self.btn_generate)
        row.addWidget(self.btn_reset_instr)
        row.addStretch(1)
        il.addLayout(row)
        self.instr_table = QTableWidget(0, 4)
        self.instr_table.setObjectName("InstrTable")
        self.instr_table.setHorizontalHeaderLabels(["State-Symbol", "Move to state", "Pop", "Push"])
        self.instr_table.verticalHeader().setVisible(False)
        self.instr_table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.instr_table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        il.addWidget(self.instr_table)
        lay.addWidget(self._card("Instructions", instr_box), stretch=1)

        self.btn_add_symbol.clicked.connect(self.on_add_symbol)
        self.symbol_inp.returnPressed.connect(self.on_add_symbol)
        self.btn_add_state.clicked.connect(self.on_add_state)
        self.btn_remove_state.clicked.connect(self.on_remove_state)
        self.btn_generate.clicked.connect(self.on_generate)
        self.btn_reset_instr.clicked.connect(self.on_reset_instructions)
        return page

    def _build_simulation_tab(self) -> QWidget:
        page = QWidget()
        lay = QVBoxLayout(page)
        lay.setSpacing(10)

        controls = QWidget()
        cl = QGridLayout(controls)
        cl.setContentsMargins(0, 0, 0, 0)

        self.inp = QLineEdit()
        self.inp.setPlaceholderText("Enter the string to evaluate")
        self.auto_box = QCheckBox("Automatic mode")
        self.auto_box.setChecked(self.controller.mode is Mode.AUTO)
        self.btn_start = QPushButton("Start simulation")
        self.btn_back = QPushButton("Back")
        self.btn_next = QPushButton("Next")
        for b in (self.btn_back, self.btn_next):
            b.setFixedWidth(100)

        cl.addWidget(QLabel("Input:"), 0, 0)
        cl.addWidget(self.inp, 0, 1)
        cl.addWidget(self.btn_start, 0, 2)
        cl.addWidget(self.auto_box, 1, 1)
        cl.addWidget(self.btn_back, 1, 2)
        cl.addWidget(self.btn_next, 1, 3)
        lay.addWidget(controls)

        self.tape_view = TapeView(self.p)
        lay.addWidget(self._card("Tape", self.tape_view))

        self.step_label = QLabel("")
        self.step_label.setObjectName("StepLabel")
        lay.addWidget(self.step_label)

        self.status_strip = QLabel("")
        self.status_strip.setObjectName("StatusStrip")
        self.status_strip.setTextFormat(Qt.TextFormat.RichText)
        lay.addWidget(self.status_strip)

        self.result_label = QLabel("")
        self.result_label.setObjectName("Result")
        self.result_label.setVisible(False)
        lay.addWidget(self.result_label)

        split = QSplitter(Qt.Orientation.Horizontal)
        self.stack_view = StackView(self.p)
        stack_card = self._card("Stack", self.stack_view)
        stack_card.setMinimumWidth(160)
        split.addWidget(stack_card)

        self.trace = QTextBrowser()
        self.trace.setObjectName("TraceBox")
        split.addWidget(self._card("Trace", self.trace))
        split.setStretchFactor(0, 0)
        split.setStretchFactor(1, 1)
        lay.addWidget(split, stretch=1)

        self.btn_start.clicked.connect(self.on_start)
        self.inp.returnPressed.connect(self.on_start)
        self.btn_back.clicked.connect(self.on_back)
        self.btn_next.clicked.connect(self.on_next)
        self.auto_box.toggled.connect(self.on_mode_toggled)
        return page

    def _apply_style(self):
        self.setStyleSheet(f"""
            QWidget {{
                background: {self.p["bg"]};
                color: {self.p["text"]};
                font-family: "Segoe UI";
            }}
            QLabel#HeaderTitle {{
                font-size: 16px;
                font-weight: 800;
            }}
            QLabel#HeaderSub, QLabel#Hint {{
                font-size: 12px;
                color: {self.p["muted"]};
            }}
            QLabel#StateCount {{
                font-size: 15px;
                font-weight: 700;
                padding: 0 8px;
            }}
            QLabel#StatusStrip {{
                background: {self.p["card_bg_2"]};
                border: 1px solid {self.p["border"]};
                border-radius: 10px;
                padding: 8px 10px;
                font-size: 12px;
            }}
            QWidget#Card {{
                background: {self.p["card_bg"]};
                border: 1px solid {self.p["border"]};
                border-radius: 12px;
            }}
            QLabel#CardTitle {{
                font-size: 12px;
                font-weight: 800;
            }}
            QLineEdit, QComboBox {{
                background: {self.p["card_bg_2"]};
                border: 1px solid {self.p["border"]};
                border-radius: 8px;
                padding: 6px 10px;
                font-size: 12px;
            }}
            QPushButton {{
                background: {self.p["btn_secondary"]};
                border: 1px solid {self.p["btn_secondary_border"]};
                border-radius: 7px;
                padding: 8px 10px;
                font-size: 12px;
                font-weight: 600;
            }}
            QPushButton:checked {{
                background: {self.p["active_fill"]};
                border: 2px solid {self.p["active_border"]};
            }}
            QPushButton:disabled {{
                color: {self.p["muted"]};
            }}
            QPushButton[text="Start simulation"], QPushButton[text="Next"] {{
                background: {self.p["btn_primary"]};
                color: white;
                border: 1px solid #1d4ed8;
            }}
            QPushButton[text="Reset instructions"] {{
                background: {self.p["btn_reset_bg"]};
                color: {self.p["btn_reset_text"]};
                border: 1px solid {self.p["btn_reset_border"]};
            }}
            QHeaderView::section {{
                background: {self.p["card_bg_2"]};
                color: {self.p["muted"]};
                padding: 6px;
                border: 0px;
                font-weight: 700;
            }}
            QTextBrowser#TraceBox {{
                background: {self.p["card_bg"]};
                border: 0px;
                font-family: "{self.p["mono_font"]}";
                font-size: 13px;
            }}
        """)

    # ----------------------------- parameters -----------------------------

    def _edit(self, action, *args) -> bool:
        try:
            action(*args)
        except DefinitionError as e:
            QMessageBox.warning(self, "Invalid definition", str(e))
            return False
        return True

    def on_add_symbol(self):
        if self._edit(self.definition.add_symbol, self.symbol_inp.text()):
            self.symbol_inp.clear()
        self._definition_changed()

    def on_remove_symbol(self, sym: str):
        self._edit(self.definition.remove_symbol, sym)
        self._definition_changed()

    def on_add_state(self):
        self._edit(self.definition.add_state)
        self._definition_changed()

    def on_remove_state(self):
        self._edit(self.definition.remove_state)
        self._definition_changed()

    def on_toggle_accepting(self, state: int):
        self._edit(self.definition.toggle_accepting, state)
        self._rebuild_state_buttons()

    def on_generate(self):
        self.definition.generate_instruction_slots()
        self._definition_changed()

    def on_reset_instructions(self):
        self.definition.reset_instructions()
        self._definition_changed()

    def on_instruction_changed(self, key: TransitionKey, field: str, value: str):
        self._edit(self.definition.set_instruction, key, field, value)
        self._sync_ui()

    def _definition_changed(self):
        self._rebuild_alphabet_chips()
        self._rebuild_state_buttons()
        self._rebuild_instruction_table()
        self._sync_ui()

    def _rebuild_alphabet_chips(self):
        clear_layout(self.chips)
        for sym in self.definition.alphabet:
            chip = QPushButton(f"{sym}  ✕")
            chip.setToolTip(f"Remove '{sym}'")
            chip.clicked.connect(lambda _=False, s=sym: self.on_remove_symbol(s))
            self.chips.addWidget(chip)

    def _rebuild_state_buttons(self):
        clear_layout(self.state_buttons)
        self.state_count.setText(str(self.definition.states))
        for q in range(self.definition.states):
            b = QPushButton(state_label(q))
            b.setCheckable(True)
            b.setChecked(q in self.definition.accepted_states)
            b.clicked.connect(lambda _=False, s=q: self.on_toggle_accepting(s))
            self.state_buttons.addWidget(b)
        sink = QPushButton(REJECT_SINK_LABEL)
        sink.setEnabled(False)
        self.state_buttons.addWidget(sink)

    def _rebuild_instruction_table(self):
        self.instruction_combos.clear()
        self.instr_table.setRowCount(0)
        if not self.definition.instructions_generated:
            return

        # (display text, stored value)
        targets = [("", "")] + [(state_label(q), state_label(q)) for q in range(self.definition.states)]
        targets.append((REJECT_SINK_LABEL, REJECT_SINK_LABEL))
        stack_syms = [(EMPTY_CHOICE, EPSILON)] + [(sym, sym) for sym in self.definition.alphabet]

        for row, (key, instr) in enumerate(self.definition.instructions.items()):
            self.instr_table.insertRow(row)
            item = QTableWidgetItem(str(key))
            item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
            self.instr_table.setItem(row, 0, item)

            current = {
                "target": state_label(instr.target),
                "pop": instr.pop,
                "push": instr.push,
            }
            for col, field in enumerate(("target", "pop", "push"), start=1):
                combo = QComboBox()
                for text, data in (targets if field == "target" else stack_syms):
                    combo.addItem(text, data)
                combo.setCurrentIndex(max(0, combo.findData(current[field])))
                combo.currentIndexChanged.connect(
                    lambda _, c=combo, k=key, f=field: self.on_instruction_changed(k, f, c.currentData()))
                self.instr_table.setCellWidget(row, col, combo)
                self.instruction_combos[(key, field)] = combo

    # ----------------------------- simulation -----------------------------

    def on_start(self):
        if not self.definition.instructions_generated:
            return
        text = self.inp.text().strip()
        if any(len(sym) > 1 for sym in self.definition.alphabet):
            self.tape_symbols = tokenize(self.definition.alphabet, text)
        else:
            self.tape_symbols = list(text)

        result = run(self.definition.copy(), self.tape_symbols)
        logger.debug("simulation started on %d symbols: %s", len(self.tape_symbols), result.verdict.message)

        self.trace.clear()
        self.result_label.setVisible(False)
        if not self.definition.is_ready():
            self._append_trace("Some instructions have no target state; they count as undefined.")
        self._append_trace("Loaded. Ready.")
        self._last_cursor = 0
        self.controller.load(result)

    def on_mode_toggled(self, checked: bool):
        self.controller.set_mode(Mode.AUTO if checked else Mode.MANUAL)

    def on_next(self):
        self.controller.step_forward()

    def on_back(self):
        self.controller.step_backward()

    def _show_configuration(self, cfg: Configuration):
        self.result_label.setVisible(False)
        consumed = len(self.tape_symbols) - len(cfg.remaining)
        self.tape_view.render_tape(self.tape_symbols, consumed)
        self.stack_view.render_stack(cfg.stack)

        rem = cfg.remaining_text or EPSILON
        self.status_strip.setText(
            f"State: {html_escape(state_label(cfg.state))}  |  "
            f"Stack top: {html_escape(cfg.top)}  |  "
            f"Remaining: {html_escape(rem)}  |  "
            f"Stack: {html_escape(', '.join(cfg.stack))}"
        )

        cursor = self.controller.cursor
        if cursor < self._last_cursor:
            self._append_trace("Back.")
        elif cursor > 0:
            self._append_trace(cfg.note)
        self._last_cursor = cursor

    def _show_verdict(self, verdict: Verdict):
        last = self.controller.trace[-1]
        consumed = len(self.tape_symbols) - len(last.remaining)
        self.tape_view.render_tape(self.tape_symbols, consumed, done=True, accepted=verdict.accepted)

        if not verdict.accepted and verdict.detail:
            self._append_trace(verdict.detail)
        self._append_trace("ACCEPT." if verdict.accepted else "REJECT.")
        self._last_cursor = self.controller.cursor

        color = self.p["accept"] if verdict.accepted else self.p["rej"]
        fill = self.p["ok_fill"] if verdict.accepted else self.p["bad_fill"]
        self.result_label.setStyleSheet(
            f"background: {fill}; color: {color}; border: 1px solid {color};"
            f"border-radius: 10px; padding: 8px 10px; font-weight: 800;")
        self.result_label.setText(verdict.message)
        self.result_label.setVisible(True)

    def _trace_html(self, line: str) -> str:
        esc = html_escape(line)

        if esc.strip() in ("ACCEPT.", "REJECT."):
            color = self.p["accept"] if esc.strip() == "ACCEPT." else self.p["rej"]
            return (
                f"<div style='white-space:pre; margin:8px 0 4px 0;"
                f"font-size:18px; font-weight:900; color:{color};'>{esc.strip()[:-1]}</div>"
            )

        esc = esc.replace("δ(", f"<span style='color:{self.p['accept']};font-weight:800;'>δ(</span>")
        esc = esc.replace(" → ", "<span style='color:#93c5fd;font-weight:900;'> → </span>")
        esc = esc.replace("push", f"<span style='color:{self.p['push']};font-weight:900;'>push</span>")
        esc = esc.replace("pop", f"<span style='color:{self.p['pop']};font-weight:900;'>pop</span>")
        esc = esc.replace("undefined", f"<span style='color:{self.p['rej']};font-weight:900;'>undefined</span>")

        return f"<div style='white-space:pre; margin:0; padding:0;'>{esc}</div>"

    def _append_trace(self, text: str):
        self.trace.append(self._trace_html(text))

    def _sync_ui(self):
        has_trace = bool(self.controller.trace)
        manual = self.controller.mode is Mode.MANUAL

        self.btn_generate.setEnabled(not self.definition.instructions_generated)
        self.btn_reset_instr.setEnabled(self.definition.instructions_generated)
        self.btn_remove_state.setEnabled(self.definition.states > 1)
        self.btn_start.setEnabled(self.definition.instructions_generated)

        self.btn_back.setVisible(manual)
        self.btn_next.setVisible(manual)
        self.btn_back.setEnabled(has_trace and self.controller.cursor > 0)
        self.btn_next.setEnabled(has_trace and not self.controller.is_finished())

        self.step_label.setText(self.controller.step_label())
        if self.auto_box.isChecked() != (not manual):
            self.auto_box.blockSignals(True)
            self.auto_box.setChecked(not manual)
            self.auto_box.blockSignals(False)

    def closeEvent(self, event):
        self.controller.shutdown()
        super().closeEvent(event)


def main():
    logging.basicConfig(level=logging.WARNING)
    app = QApplication(sys.argv)
    w = PDAWindow()
    w.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
