"""NiceGUI web UI for the Pacer interval timer."""

from __future__ import annotations

from dataclasses import dataclass

from nicegui import core, ui

from pacer.core.state import Phase
from pacer.ui.announcer import Cue, QueuedAnnouncer
from pacer.ui.controller import UIController
from pacer.workout.library import build_config_from_preset, list_presets
from pacer.workout.model import ConfigError, WorkoutConfig
from pacer.workout.progress import format_time, phase_label

REFRESH_SEC = 0.25
CUSTOM_PRESET = "custom"

PHASE_COLORS = {
    Phase.SETUP: "#9caecf",
    Phase.RUN: "#22c55e",
    Phase.WALK: "#38bdf8",
    Phase.COMPLETE: "#f59e0b",
}


@dataclass
class WebState:
    status: str = "Ready"
    last_phase: Phase = Phase.SETUP


def _coerce_int(value: object) -> int | None:
    # ui.number yields floats (or None when cleared).
    if value is None or value == "":
        return None
    try:
        number = float(str(value))
    except ValueError:
        return None
    if not number.is_integer():
        return None
    return int(number)


def config_from_inputs(run_value: object, walk_value: object, reps_value: object) -> WorkoutConfig:
    run_sec = _coerce_int(run_value)
    walk_sec = _coerce_int(walk_value)
    repetitions = _coerce_int(reps_value)
    if run_sec is None or walk_sec is None or repetitions is None:
        raise ConfigError("Run time, walk time and repetitions must be whole numbers")
    config = WorkoutConfig(run_sec=run_sec, walk_sec=walk_sec, repetitions=repetitions)
    config.validate()
    return config


def cue_script(cue: Cue) -> str:
    parts = ["(() => {"]
    if cue.tone_hz is not None:
        parts.append(
            f"""
              const ctx = new (window.AudioContext || window.webkitAudioContext)();
              const osc = ctx.createOscillator();
              const gain = ctx.createGain();
              osc.connect(gain);
              gain.connect(ctx.destination);
              osc.frequency.setValueAtTime({cue.tone_hz}, ctx.currentTime);
              gain.gain.setValueAtTime({cue.tone_gain}, ctx.currentTime);
              gain.gain.exponentialRampToValueAtTime(0.001, ctx.currentTime + {cue.tone_sec});
              osc.start();
              osc.stop(ctx.currentTime + {cue.tone_sec});
              setTimeout(() => ctx.close(), {int(cue.tone_sec * 1000) + 100});
            """
        )
    if cue.speech is not None:
        delay_ms = int(cue.speech_delay_sec * 1000)
        parts.append(
            f"""
              setTimeout(() => {{
                if (!window.speechSynthesis) return;
                window.speechSynthesis.cancel();
                const utterance = new SpeechSynthesisUtterance({cue.speech!r});
                utterance.rate = 1.0;
                utterance.pitch = 1.0;
                utterance.volume = 1.0;
                window.speechSynthesis.speak(utterance);
              }}, {delay_ms});
            """
        )
    parts.append("})();")
    return "".join(parts)


def run_web_ui(
    *,
    host: str = "127.0.0.1",
    port: int = 8088,
    muted: bool = False,
    initial_config: WorkoutConfig | None = None,
) -> int:
    announcer = QueuedAnnouncer(muted=muted)
    controller = UIController(sink=announcer)
    state = WebState()
    ui.add_head_html(
        """
        <style>
          :root {
            --gb-bg: #0b1220;
            --gb-surface: #0f1b35;
            --gb-surface-2: #132449;
            --gb-text: #e5e7eb;
            --gb-muted: #9caecf;
          }
          body {
            background: radial-gradient(circle at top, #17223f 0%, var(--gb-bg) 58%);
            color: var(--gb-text);
            font-family: Arial, "Segoe UI", sans-serif;
          }
          .gb-card {
            background: linear-gradient(180deg, var(--gb-surface) 0%, var(--gb-surface-2) 100%);
            border: 1px solid rgba(148, 163, 184, 0.22);
            border-radius: 14px;
            box-shadow: 0 12px 24px rgba(2, 6, 23, 0.32);
          }
          .gb-clock {
            font-size: 4.5rem;
            font-weight: 700;
            font-variant-numeric: tabular-nums;
          }
          .gb-muted { color: var(--gb-muted); }
        </style>
        """
    )

    preset_options = {CUSTOM_PRESET: "Custom"}
    preset_options.update({preset.key: f"{preset.name} ({preset.category})" for preset in list_presets()})

    with ui.column().classes("w-full max-w-md mx-auto gap-6 p-4"):
        with ui.row().classes("w-full items-center justify-between"):
            ui.label("PACER").classes("text-xl font-semibold tracking-wide")
            sound_toggle = ui.switch("Sound", value=not muted)

        with ui.card().classes("gb-card w-full"):
            preset_select = ui.select(preset_options, value=CUSTOM_PRESET, label="Preset").classes("w-full")
            run_input = ui.number("Run Time (seconds)", min=1, precision=0).classes("w-full")
            walk_input = ui.number("Walk Time (seconds)", min=1, precision=0).classes("w-full")
            reps_input = ui.number("Repetitions", min=1, precision=0).classes("w-full")

        with ui.card().classes("gb-card w-full items-center"):
            phase_info = ui.label("Ready").classes("text-2xl font-semibold")
            clock_label = ui.label("00:00").classes("gb-clock")
            progress_bar = ui.linear_progress(value=0.0, show_value=False).classes("w-full")
            elapsed_label = ui.label("Total Time: 00:00").classes("text-sm gb-muted")
            status_label = ui.label("Status: Ready").classes("text-sm gb-muted")

        with ui.row().classes("w-full justify-center gap-4"):
            start_btn = ui.button("Start").props("color=positive")
            pause_btn = ui.button("Pause").props("color=warning")
            reset_btn = ui.button("Reset").props("outline color=white")

    if initial_config is not None:
        run_input.value = initial_config.run_sec
        walk_input.value = initial_config.walk_sec
        reps_input.value = initial_config.repetitions

    def clear_inputs() -> None:
        run_input.value = None
        walk_input.value = None
        reps_input.value = None
        preset_select.value = CUSTOM_PRESET

    def play_cues() -> None:
        cues = announcer.drain()
        if core.loop is None:
            # NiceGUI loop/client not ready yet during initial startup.
            return
        for cue in cues:
            ui.run_javascript(cue_script(cue))

    def refresh_ui() -> None:
        snap = controller.snapshot()
        config = controller.config
        repetitions = config.repetitions if config is not None else None

        if snap.phase == Phase.SETUP and state.last_phase != Phase.SETUP:
            # Finished or reset: inputs are cleared, like a fresh page.
            clear_inputs()
        state.last_phase = snap.phase

        phase_info.set_text(phase_label(snap.phase, snap.current_rep, repetitions))
        phase_info.style(f"color: {PHASE_COLORS[snap.phase]};")
        clock_label.set_text(format_time(snap.time_left_sec))
        progress_bar.set_value(controller.progress_pct() / 100.0)
        elapsed_label.set_text(f"Total Time: {format_time(snap.elapsed_sec)}")
        status_label.set_text(f"Status: {state.status}")

        editable = snap.phase == Phase.SETUP
        for field in (preset_select, run_input, walk_input, reps_input):
            field.set_enabled(editable and not snap.running)
        start_btn.set_enabled(not snap.running)
        pause_btn.set_enabled(snap.running)
        start_btn.set_text("Start" if snap.phase == Phase.SETUP else "Resume")
        play_cues()

    def on_finish(completed: bool) -> None:
        state.status = "Workout complete" if completed else "Ready"

    async def on_start() -> None:
        try:
            config = config_from_inputs(run_input.value, walk_input.value, reps_input.value)
        except ConfigError as exc:
            ui.notify(str(exc), color="negative")
            return
        await controller.start_workout(config, on_finish=on_finish)
        state.status = "Running"
        refresh_ui()

    def on_pause() -> None:
        controller.pause()
        state.status = "Paused"
        refresh_ui()

    async def on_reset() -> None:
        await controller.reset()
        state.status = "Ready"
        clear_inputs()
        refresh_ui()

    def on_preset_change() -> None:
        key = str(preset_select.value or CUSTOM_PRESET)
        if key == CUSTOM_PRESET:
            return
        config = build_config_from_preset(key)
        run_input.value = config.run_sec
        walk_input.value = config.walk_sec
        reps_input.value = config.repetitions

    def on_sound_toggle() -> None:
        if bool(sound_toggle.value) == announcer.muted:
            announcer.toggle_mute()

    preset_select.on_value_change(lambda _: on_preset_change())
    sound_toggle.on_value_change(lambda _: on_sound_toggle())
    start_btn.on_click(on_start)
    pause_btn.on_click(on_pause)
    reset_btn.on_click(on_reset)

    ui.timer(REFRESH_SEC, refresh_ui)
    ui.run(host=host, port=port, reload=False, title="Pacer Interval Timer")
    return 0
