from __future__ import annotations

import inspect

import pytest

from contact_desk.contacts.contact_api import ContactApi
from contact_desk.core.ports import ContactSource, TaskSource
from contact_desk.tasks.task_api import TaskApi


def _public_methods(cls) -> list[str]:
    return sorted(n for n, v in vars(cls).items() if callable(v) and not n.startswith("_"))


@pytest.mark.parametrize(("port", "impl"), [(ContactSource, ContactApi), (TaskSource, TaskApi)])
def test_api_signatures_match_ports(port, impl) -> None:
    names = _public_methods(port)
    assert names
    for name in names:
        method = getattr(impl, name)
        assert inspect.iscoroutinefunction(method), name
        assert inspect.signature(method) == inspect.signature(getattr(port, name)), name
