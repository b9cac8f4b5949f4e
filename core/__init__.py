from .chain import Chain
from .client import Client
