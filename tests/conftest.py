import pytest

from WebAppGen import FeatureFlags
from WebAppGen.logging import Logger

@pytest.fixture
def quiet_logger():
	return Logger(quiet=True)

@pytest.fixture
def no_flags():
	return FeatureFlags(compass_bootstrap=False, include_requirejs=False, include_requirehm=False)

@pytest.fixture
def all_flags():
	return FeatureFlags(compass_bootstrap=True, include_requirejs=True, include_requirehm=True)
