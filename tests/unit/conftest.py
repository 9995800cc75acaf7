"""Unit test configuration.

Unit tests are fast and isolated: the document store is either mocked with
respx or replaced by the in-memory workspace.
"""

import pytest


pytestmark = pytest.mark.unit
