import pytest

from ncorps.config import (
    CANCELLED_PRESET,
    KEY_BACKSPACE,
    KEY_ESCAPE,
    KEY_KP_ENTER,
    KEY_RETURN,
    QUIT_BUTTON,
    START_BUTTON,
    Button,
    ConfigForm,
    Rect,
    SimulationConfig,
)

FIELD_POINTS = [(210, 90), (210, 140), (210, 190)]
START_POINT = (210, 270)
QUIT_POINT = (350, 270)


def test_config_defaults():
    config = SimulationConfig()
    assert config.num_bodies == 10
    assert config.gravitational_constant == 50.0
    assert config.time_step == 0.01
    assert config.preset == 1
    assert config.use_preset is True
    assert config.cancelled is False


def test_config_modification():
    config = SimulationConfig()
    config.num_bodies = 25
    config.gravitational_constant = 75.5
    config.use_preset = False
    assert config.num_bodies == 25
    assert config.gravitational_constant == 75.5
    assert config.use_preset is False


def test_rect_contains_edges():
    rect = Rect(10, 20, 5, 4)
    assert rect.contains(10, 20)
    assert rect.contains(14, 23)
    assert not rect.contains(15, 20)
    assert not rect.contains(10, 24)
    assert not rect.contains(9, 21)


def test_button_starts_unpressed():
    button = Button(Rect(0, 0, 1, 1), "x", 3)
    assert button.pressed is False


def test_form_layout():
    form = ConfigForm()
    assert [b.button_id for b in form.buttons] == [1, 2, 3, 4, START_BUTTON, QUIT_BUTTON]
    assert form.field_values == ["10", "50.0", "0.01"]
    assert len(form.input_fields) == len(form.field_labels) == 3


@pytest.mark.parametrize("point, preset", [((60, 40), 1), ((210, 40), 2), ((360, 40), 3), ((510, 40), 4)])
def test_click_preset(point, preset):
    form = ConfigForm()
    form.config.use_preset = False
    form.click(*point)
    assert form.config.preset == preset
    assert form.config.use_preset is True
    assert form.running is False
    assert form.buttons[preset - 1].pressed


def test_click_quit_cancels():
    form = ConfigForm()
    form.click(*QUIT_POINT)
    assert form.config.preset == CANCELLED_PRESET
    assert form.config.cancelled
    assert form.running is False


def test_cancel():
    form = ConfigForm()
    form.cancel()
    assert form.running is False
    assert form.config.preset == CANCELLED_PRESET


def test_click_empty_space_changes_nothing():
    form = ConfigForm()
    form.click(5, 5)
    assert form.running is True
    assert form.selected_field is None
    assert form.input_active is False


def test_click_field_selects_it():
    form = ConfigForm()
    form.click(*FIELD_POINTS[1])
    assert form.selected_field == 1
    assert form.input_active is True
    assert form.input_buffer == "50.0"
    form.click(5, 5)
    assert form.selected_field is None
    assert form.input_active is False


def test_first_field_accepts_only_digits():
    form = ConfigForm()
    form.click(*FIELD_POINTS[0])
    for char in ["5", ".", "-", "a"]:
        form.handle_text_input(char)
    assert form.display_text(0) == "105"


def test_decimal_field_accepts_point_and_minus():
    form = ConfigForm()
    form.click(*FIELD_POINTS[2])
    for char in ["-", ".", "7", "x"]:
        form.handle_text_input(char)
    assert form.display_text(2) == "0.01-.7"


def test_only_first_character_is_used():
    form = ConfigForm()
    form.click(*FIELD_POINTS[0])
    form.handle_text_input("42")
    assert form.input_buffer == "104"


def test_input_limited_to_ten_characters():
    form = ConfigForm()
    form.click(*FIELD_POINTS[0])
    for _ in range(20):
        form.handle_text_input("9")
    assert len(form.input_buffer) == 10


def test_text_ignored_without_selection():
    form = ConfigForm()
    form.handle_text_input("5")
    assert form.input_buffer == ""
    assert form.field_values[0] == "10"


@pytest.mark.parametrize("key", [KEY_RETURN, KEY_KP_ENTER])
def test_enter_commits(key):
    form = ConfigForm()
    form.click(*FIELD_POINTS[0])
    form.handle_key_down(KEY_BACKSPACE)
    form.handle_key_down(KEY_BACKSPACE)
    form.handle_text_input("2")
    form.handle_text_input("5")
    form.handle_key_down(key)
    assert form.field_values[0] == "25"
    assert form.selected_field is None
    assert form.input_active is False
    assert form.display_text(0) == "25"


def test_escape_discards():
    form = ConfigForm()
    form.click(*FIELD_POINTS[0])
    form.handle_text_input("7")
    form.handle_key_down(KEY_ESCAPE)
    assert form.field_values[0] == "10"
    assert form.input_buffer == "10"
    assert form.selected_field is None


def test_backspace_on_empty_buffer():
    form = ConfigForm()
    form.click(*FIELD_POINTS[0])
    for _ in range(5):
        form.handle_key_down(KEY_BACKSPACE)
    assert form.input_buffer == ""


def test_start_applies_fields():
    form = ConfigForm()
    form.field_values = ["15", "30.0", "0.005"]
    form.click(*START_POINT)
    assert form.config.num_bodies == 15
    assert form.config.gravitational_constant == 30.0
    assert form.config.time_step == 0.005
    assert form.config.use_preset is False
    assert form.running is False


@pytest.mark.parametrize(
    "values, expected",
    [
        (["500", "2000", "1"], (100, 1000.0, 0.1)),
        (["0", "0.01", "0.0001"], (1, 0.1, 0.001)),
        (["-3", "-5", "-1"], (1, 0.1, 0.001)),
    ],
)
def test_update_config_clamps(values, expected):
    form = ConfigForm()
    form.field_values = values
    form.update_config()
    config = form.config
    assert (config.num_bodies, config.gravitational_constant, config.time_step) == expected


def test_update_config_uses_numeric_prefix():
    form = ConfigForm()
    form.field_values = ["12", "1.5.5", "0.02-"]
    form.update_config()
    assert form.config.num_bodies == 12
    assert form.config.gravitational_constant == 1.5
    assert form.config.time_step == 0.02


@pytest.mark.parametrize("values", [["", "50", "0.01"], ["10", "-", "0.01"], ["10", "50", "."], ["9999999999", "1", "0.01"]])
def test_update_config_invalid_resets_defaults(values, capsys):
    form = ConfigForm()
    form.config.num_bodies = 42
    form.config.gravitational_constant = 7.0
    form.config.time_step = 0.05
    form.field_values = values
    form.update_config()
    assert form.config.num_bodies == 10
    assert form.config.gravitational_constant == 50.0
    assert form.config.time_step == 0.01
    assert "Erreur de conversion des valeurs" in capsys.readouterr().err