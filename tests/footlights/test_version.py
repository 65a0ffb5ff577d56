import os
import re

import footlights
from footlights.version import __version__


def test_version_is_declared_literally() -> None:
    # setup.py reads the version from the text of version.py.
    path = os.path.join(os.path.dirname(footlights.__file__), "version.py")
    with open(path, encoding="utf-8") as f:
        match = re.search(r"^__version__ = [\"']([^\"']+)[\"']", f.read(), re.M)
    assert match is not None
    assert match.group(1) == __version__ == footlights.__version__
