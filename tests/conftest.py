import textwrap

import pytest

PYTHON_CONFIG = textwrap.dedent(
    """\
    general:
      line_number_padding_right: 1
      line_number_padding_left: 0
      tab_width: 8
      undo_period: 10
    theme:
      editor_bg: [0, 0, 0]
      editor_fg: [255, 255, 255]
      status_bg: [10, 10, 10]
      status_fg: [200, 200, 200]
      line_number_fg: [90, 90, 90]
    highlights:
      strings: [39, 222, 145]
      keywords: [134, 76, 232]
    languages:
      - name: Python
        icon: "py "
        extensions: [py]
        keywords: [def, return]
        definitions:
          strings: ['(".*?")']
    """
)


@pytest.fixture
def python_config_text():
    return PYTHON_CONFIG


@pytest.fixture
def python_config_file(tmp_path, python_config_text):
    path = tmp_path / "config.yaml"
    path.write_text(python_config_text, encoding="utf-8")
    return path
