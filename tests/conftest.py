import io

import pytest

from tracker_core.budget import BudgetManager
from tracker_core.ledger import Ledger
from tracker_core.parser import Parser
from tracker_core.ui import ConsoleUI


@pytest.fixture
def ledger():
    return Ledger()


@pytest.fixture
def budget_manager():
    return BudgetManager()


@pytest.fixture
def parser():
    return Parser()


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def err():
    return io.StringIO()


@pytest.fixture
def ui(out, err):
    return ConsoleUI(out=out, err=err)
