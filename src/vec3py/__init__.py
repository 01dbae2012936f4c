import os

from vec3py.logging import config_logging, set_up_simple_logging
from vec3py.vector import Vector3


def read(fil):
    fil = os.path.join(os.path.dirname(__file__), fil)
    with open(fil, encoding="utf-8") as f:
        return f.read().strip()


__version__ = read("version.txt")
