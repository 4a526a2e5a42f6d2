from .json_ex import json_default_ex, json_dumps_ex
