from __future__ import annotations

from treefs.config.schema import FixtureSpec, TreeConfig
from treefs.models.entry import make_directory, make_file


def default_config() -> TreeConfig:
    return TreeConfig()


def sample_fixture() -> FixtureSpec:
    return FixtureSpec(
        config=TreeConfig(root="/project"),
        entries=[
            make_directory(
                "src",
                make_file("main.py", 'print("hello")\n'),
                make_directory("pkg", make_file("__init__.py")),
            ),
            make_file("settings.json", {"debug": True, "name": "demo"}),
            make_file("README.md", "# demo\n"),
        ],
    )
