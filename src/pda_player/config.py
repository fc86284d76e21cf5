# ----------------------------- Symbols -----------------------------

EPSILON = "ε"
STACK_BOTTOM = "$"
RESERVED_SYMBOLS = frozenset({EPSILON, STACK_BOTTOM})

# qk: implicit reject sink, never a transition source and never accepting.
REJECT_SINK = -1
REJECT_SINK_LABEL = "qk"

# ----------------------------- Playback -----------------------------

AUTOPLAY_INTERVAL_MS = 1000

# ----------------------------- Window palette -----------------------------

PALETTE = {
    "bg": "#0b1220",
    "card_bg": "#121a2a",
    "card_bg_2": "#0f1726",
    "border": "#27324a",
    "text": "#e5e7eb",
    "muted": "#9aa3b2",
    "mono_font": "Cascadia Mono",
    "active_fill": "#0b2a4a",
    "active_border": "#3b82f6",
    "ok_fill": "#0b3a2a",
    "ok_border": "#10b981",
    "bad_fill": "#3a0b12",
    "bad_border": "#ef4444",
    "stack_border": "#475569",
    "push": "#3b82f6",
    "pop": "#f59e0b",
    "accept": "#10b981",
    "rej": "#ef4444",
    "btn_primary": "#3B82F6",
    "btn_secondary": "#1f2937",
    "btn_secondary_border": "#334155",
    "btn_reset_bg": "#2a0f14",
    "btn_reset_border": "#7f1d1d",
    "btn_reset_text": "#fecaca",
}
