"""Init python files as modules."""
from tct.toroid_exceptions import *
from tct.boundary_check import *
from tct.toml_checker import *
from tct.toroid_dtos import *
# physical models
from tct.resistance import *
from tct.multilayer import *
from tct.boundary_curve import *
from tct.rogowski import *
# optimization classes
from tct.toroid_optimization import *
from tct.toroid_export import *
from tct.generate_toml import *
# supervision class
from tct.toroidmainctl import *
