from .artifacts import PatternRule, Pin, Module
from .operators import Operator, OperatorResult
from .errors import *
from .enums import *
from .provenance import *
