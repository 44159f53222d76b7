import time
import dearpygui.dearpygui as dpg


def _make_callbacks(shared):
    def pause_cb():
        shared['toggle_pause'] = True
    def reset_cb():
        shared['reset_world'] = True
    def wind_cb(sender, app_data, user_data):
        shared['wind_lock'] = bool(app_data)
    def exit_cb():
        shared['__exit__'] = True
    return pause_cb, reset_cb, wind_cb, exit_cb


def _status_lines(shared):
    lines = []
    for name, active, cut in shared.get('cloth_stats', []):
        lines.append(f"{name:<12} edges={active:>5}  cut={cut:>5}")
    return "\n".join(lines)


def run_gui(shared):
    """
    Run DearPyGui in its own process. Writes commands into `shared`, reads
    per-cloth stats the simulation loop publishes there.
    """
    dpg.create_context()

    pause_cb, reset_cb, wind_cb, exit_cb = _make_callbacks(shared)

    with dpg.window(label="Cloth Controls", tag="controls_window", width=380, height=320):
        dpg.add_text("Left drag: cut   Right hold: wind   Space: reset")
        dpg.add_separator()
        dpg.add_button(label="Pause / Toggle", callback=lambda s, a, u: pause_cb())
        dpg.add_button(label="Reset Cloths", callback=lambda s, a, u: reset_cb())
        dpg.add_checkbox(label="Wind follows cursor", tag="wind_checkbox",
                         default_value=bool(shared.get('wind_lock', False)), callback=wind_cb)
        dpg.add_button(label="Exit", callback=lambda s, a, u: exit_cb())
        dpg.add_spacer()
        dpg.add_text("Status:", tag="status_label")
        dpg.add_text("", tag="status_text")
        dpg.add_text("", tag="cloth_text")

    dpg.create_viewport(title='Cloth Controls', width=400, height=340)
    dpg.set_primary_window("controls_window", True)
    dpg.setup_dearpygui()
    dpg.show_viewport()

    try:
        while not shared.get('__exit__', False) and dpg.is_dearpygui_running():
            state = "paused" if shared.get('paused', False) else "running"
            dpg.set_value("status_text", f"{state}, fps={shared.get('fps', 0.0):.0f}")
            dpg.set_value("cloth_text", _status_lines(shared))

            dpg.render_dearpygui_frame()
            time.sleep(0.01)
    finally:
        dpg.destroy_context()
