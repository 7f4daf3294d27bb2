from .complex import Phasor, format_phasor, phasor2rect, rect2phasor
from .engineering import eng_notation
from .numpy_types import AngleUnits, InvalidArgument
from .options import PhasorOptions, RectOptions
