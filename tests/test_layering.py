import ast
from pathlib import Path

import pytest

from app.application.schemas import ReservationPayload
from app.application.use_cases.create_reservation import parse_reservation_data

APP_ROOT = Path(__file__).resolve().parent.parent / "app"


def _imported_modules(path: Path) -> set[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"))
    modules = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            modules.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module:
            modules.add(node.module)
    return modules


@pytest.mark.parametrize("layer", ["domain", "application"])
def test_inner_layers_do_not_import_api(layer):
    offenders = {
        str(path.relative_to(APP_ROOT)): sorted(m for m in _imported_modules(path) if m.startswith("app.api"))
        for path in (APP_ROOT / layer).rglob("*.py")
    }
    assert {path: mods for path, mods in offenders.items() if mods} == {}


def test_intake_parses_with_application_schema():
    payload = parse_reservation_data('{"property_id": "PROP-001", "years_employed": 3}')

    assert isinstance(payload, ReservationPayload)
    assert payload.property_id == "PROP-001"
    assert payload.years_employed == 3
