"""
Chiral EFT operators in the relative harmonic-oscillator basis.
reduced matrix elements order by order (LO - N4LO), one- and two-body part
"""
from .Order import Order, ORDERS, order_from_name, orders_up_to
from .OscillatorParameter import OscillatorParameter
from .RelativeSpace import RelativeStateLSJT, RelativeCMStateLSJT, RelativeSpaceLSJT, RelativeSectorsLSJT
from .ChiralOperator import ChiralOperator, UnrecognizedOperatorError, create_operator
from .M1Operator import M1Operator
from .IdentityOperator import IdentityOperator
from .RelativeOperator import RelativeOperatorLSJT
