import time
import dearpygui.dearpygui as dpg

from gravity.constants import (ENTITY_FIELDS, ENTITY_LIMIT, FIELD_LABELS, MAX_TICK_INTERVAL_MS,
                               MIN_TICK_INTERVAL_MS, TICK_INTERVAL_MS)


def _entry_tag(row, col):
    return f"entry_{row}_{col}"


def read_entries():
    """Collect the entity table as a list of rows of raw strings."""
    return [[dpg.get_value(_entry_tag(r, c)) or '' for c in range(ENTITY_FIELDS)]
            for r in range(ENTITY_LIMIT)]


def _make_callbacks(shared):
    def tick_cb():
        # only this process increments; the simulation process tracks the last count it served
        shared['tick_requests'] = int(shared.get('tick_requests', 0)) + 1
    def auto_cb(sender, app_data, user_data):
        shared['auto_update'] = bool(app_data)
    def interval_cb(sender, app_data, user_data):
        shared['tick_interval_ms'] = int(app_data)
    def reset_cb():
        shared['entries'] = read_entries()
        shared['reset_world'] = True
    def clear_cb():
        for r in range(ENTITY_LIMIT):
            for c in range(ENTITY_FIELDS):
                dpg.set_value(_entry_tag(r, c), '')
    def exit_cb():
        shared['__exit__'] = True
    return tick_cb, auto_cb, interval_cb, reset_cb, clear_cb, exit_cb


def run_gui(shared):
    """
    Run DearPyGui in its own process. Writes user input into `shared` and
    displays the status the simulation process publishes there.
    """
    dpg.create_context()

    tick_cb, auto_cb, interval_cb, reset_cb, clear_cb, exit_cb = _make_callbacks(shared)

    with dpg.window(label="Simulation", tag="controls_window", width=640, height=640):
        dpg.add_text("Time between ticks (ms)")
        dpg.add_slider_int(label="Interval", tag="interval_slider",
                           default_value=int(shared.get('tick_interval_ms', TICK_INTERVAL_MS)),
                           min_value=MIN_TICK_INTERVAL_MS, max_value=MAX_TICK_INTERVAL_MS, callback=interval_cb)
        with dpg.group(horizontal=True):
            dpg.add_button(label="Reset", callback=lambda s, a, u: reset_cb())
            dpg.add_button(label="Tick", callback=lambda s, a, u: tick_cb())
            dpg.add_checkbox(label="AutoUpdate", tag="auto_checkbox",
                             default_value=bool(shared.get('auto_update', False)), callback=auto_cb)
            dpg.add_button(label="Exit", callback=lambda s, a, u: exit_cb())
        dpg.add_separator()

        dpg.add_text("Entities")
        with dpg.table(header_row=True, tag="entity_table"):
            for label in FIELD_LABELS:
                dpg.add_table_column(label=label)
            for r in range(ENTITY_LIMIT):
                with dpg.table_row():
                    for c in range(ENTITY_FIELDS):
                        dpg.add_input_text(tag=_entry_tag(r, c), width=-1)
        dpg.add_button(label="Clear Entries", callback=lambda s, a, u: clear_cb())
        dpg.add_separator()
        dpg.add_text("Status:", tag="status_label")
        dpg.add_text("", tag="status_text")
        dpg.add_text("", tag="errors_text")

    dpg.create_viewport(title='Gravity Controls', width=680, height=720)
    dpg.set_primary_window("controls_window", True)
    dpg.setup_dearpygui()
    dpg.show_viewport()

    try:
        while not shared.get('__exit__', False) and dpg.is_dearpygui_running():
            dpg.set_value("status_text", str(shared.get('status', '')))
            dpg.set_value("errors_text", "\n".join(shared.get('parse_errors', [])))
            dpg.render_dearpygui_frame()
            time.sleep(0.01)
    finally:
        shared['__exit__'] = True
        dpg.destroy_context()
