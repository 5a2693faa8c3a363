import importlib
import os
import sys
from glob import glob

import pytest

sys.path.append(os.getcwd())

import_files = [
    *(path[4:] for path in glob("src/novaswap/**/*.py", recursive=True)),
    *glob("scripts/*.py"),
]


@pytest.mark.parametrize("file", import_files)
def test_imports(file: str):
    module_name = file.replace("/", ".")[:-3].replace(".__init__", "")
    importlib.import_module(module_name)
