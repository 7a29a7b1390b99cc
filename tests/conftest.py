import pytest

import generate_test_files


class StubDialogs:
    """Stands in for the Tk dialogs and records what it was asked."""

    def __init__(self, input_path=None, output_path=None):
        self.input_path = input_path
        self.output_path = output_path
        self.input_calls = 0
        self.output_calls = []

    def pick_input_path(self):
        self.input_calls += 1
        return self.input_path

    def pick_output_path(self, suggested_name, initial_dir=None):
        self.output_calls.append((suggested_name, initial_dir))
        return self.output_path


@pytest.fixture
def stub_dialogs():
    return StubDialogs


@pytest.fixture(autouse=True)
def seeded_faker():
    generate_test_files.fake.seed_instance(1234)
    generate_test_files.random.seed(1234)
    generate_test_files.fake.unique.clear()
    yield
