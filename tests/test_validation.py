import pytest

from session_keys import validation, config, errors

GOOD = ("someId", "somePass", config.INTERACTIVE, 1)


def test_accepts_valid_inputs():
    validation.validate_inputs(*GOOD)
    validation.validate_inputs("a", "b", config.SENSITIVE, 512)
    validation.validate_inputs("a" * 256, "b" * 256, config.INTERACTIVE, 1)
    validation.validate_inputs("üser", "päss", config.INTERACTIVE, 75)

@pytest.mark.parametrize("id_", [None, b"someId", 1, "\ud800"])
def test_invalid_id_type(id_):
    with pytest.raises(errors.InvalidId) as excinfo:
        validation.validate_inputs(id_, "my", config.INTERACTIVE, 1)
    assert excinfo.value.reason == errors.NOT_TEXT
    assert "invalid id, not a US-ASCII or UTF-8 string" in str(excinfo.value)

@pytest.mark.parametrize("id_", ["", "a" * 257])
def test_invalid_id_length(id_):
    with pytest.raises(errors.InvalidId) as excinfo:
        validation.validate_inputs(id_, "my", config.INTERACTIVE, 1)
    assert excinfo.value.reason == errors.BAD_LENGTH
    assert "between 1 and 256 characters" in str(excinfo.value)

@pytest.mark.parametrize("password", [None, b"bin", "\udfff"])
def test_invalid_password_type(password):
    with pytest.raises(errors.InvalidPassword) as excinfo:
        validation.validate_inputs("someId", password, config.INTERACTIVE, 1)
    assert excinfo.value.reason == errors.NOT_TEXT

@pytest.mark.parametrize("password", ["", "a" * 257])
def test_invalid_password_length(password):
    with pytest.raises(errors.InvalidPassword) as excinfo:
        validation.validate_inputs("someId", password, config.INTERACTIVE, 1)
    assert excinfo.value.reason == errors.BAD_LENGTH
    assert "invalid password, must be between 1 and 256" in str(excinfo.value)

@pytest.mark.parametrize("min_entropy", [None, -1, 0, "2", 513, 2.0, True])
def test_invalid_min_entropy(min_entropy):
    with pytest.raises(errors.InvalidEntropyThreshold):
        validation.validate_inputs("someId", "somePass",
                                   config.INTERACTIVE, min_entropy)

@pytest.mark.parametrize("strength", [None, "sensitive", ("sensitive", 1, 2),
                                      config.Profile("other", 1, 2)])
def test_invalid_strength(strength):
    with pytest.raises(errors.InvalidStrength):
        validation.validate_inputs("someId", "somePass", strength, 1)

def test_validation_order():
    with pytest.raises(errors.InvalidId):
        validation.validate_inputs("", "", None, 0)
    with pytest.raises(errors.InvalidPassword):
        validation.validate_inputs("a", "", None, 0)
    with pytest.raises(errors.InvalidEntropyThreshold):
        validation.validate_inputs("a", "b", None, 0)
    with pytest.raises(errors.InvalidStrength):
        validation.validate_inputs("a", "b", None, 1)

def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        validation.validate_inputs(None, "b", config.INTERACTIVE, 1)

def test_check_entropy_boundaries():
    assert validation.check_entropy("a", 75, lambda p: 75) == 75
    with pytest.raises(errors.WeakPassword) as excinfo:
        validation.check_entropy("a", 75, lambda p: 74)
    assert excinfo.value.measured == 74
    assert excinfo.value.required == 75
    assert "at least 75 bits of estimated entropy" in str(excinfo.value)

def test_check_entropy_rounds_to_nearest():
    assert validation.check_entropy("a", 75, lambda p: 74.5) == 75
    assert validation.check_entropy("a", 75, lambda p: 75.1) == 75
    with pytest.raises(errors.WeakPassword):
        validation.check_entropy("a", 75, lambda p: 74.49)

def test_weak_password_message_has_no_password():
    with pytest.raises(errors.WeakPassword) as excinfo:
        validation.check_entropy("hunter2", 10, lambda p: 9)
    assert "hunter2" not in str(excinfo.value)

def test_zxcvbn_entropy():
    weak = validation.zxcvbn_entropy("password")
    strong = validation.zxcvbn_entropy("sky bulge stance neal barley host spec")
    assert isinstance(weak, float)
    assert 0 <= weak < strong
    assert validation.zxcvbn_entropy("x" * 256) > 0
