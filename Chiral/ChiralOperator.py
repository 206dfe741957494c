#!/usr/bin/env python3
"""
Chiral EFT operators in the relative LSJT basis.

A concrete operator lists its term evaluators in `terms`, a mapping
    (Order, representation, Abody) -> tuple of functions
with every function called as f(bra, ket, b, regularize, regulator, T0).
Abody = 2 includes the one-body terms. A missing key means the contribution
vanishes at that order.
"""
import abc
if(__package__==None or __package__==""):
    from Order import Order, ORDERS
else:
    from .Order import Order, ORDERS

class UnrecognizedOperatorError(ValueError):
    pass

class ChiralOperator(abc.ABC):
    name = None
    terms = {}
    def __init__(self, order=Order.lo, J0=0, G0=0, T0=0, T0_min=0):
        self.order = order
        self.J0 = J0     # tensor rank
        self.G0 = G0     # parity, 0: even, 1: odd
        self.T0 = T0     # isotensor rank (maximum)
        self.T0_min = T0_min

    def __repr__(self):
        return "{}(J0={}, G0={}, T0={})".format(type(self).__name__, self.J0, self.G0, self.T0)

    def reduced_matrix_element(self, order, bra, ket, b, regularize=False, regulator=1.0, T0=0, Abody=2):
        """
        < bra || O(order) || ket >, reduced in J and T
        b: OscillatorParameter, regulator: regulator length in fm
        """
        if(order == Order.full):
            return sum([self.reduced_matrix_element(o, bra, ket, b, regularize, regulator, T0, Abody) for key, o in ORDERS])
        methods = {
                Order.lo: self.lo_matrix_element,
                Order.nlo: self.nlo_matrix_element,
                Order.n2lo: self.n2lo_matrix_element,
                Order.n3lo: self.n3lo_matrix_element,
                Order.n4lo: self.n4lo_matrix_element,
                }
        if(order not in methods): return 0.0
        return methods[order](bra, ket, b, regularize, regulator, T0, Abody)

    def _sum_terms(self, order, bra, ket, b, regularize, regulator, T0, Abody):
        key = (order, bra.representation, Abody)
        if(key not in self.terms): return 0.0
        result = 0.0
        for term in self.terms[key]:
            result += term(bra, ket, b, regularize, regulator, T0)
        return result

    @abc.abstractmethod
    def lo_matrix_element(self, bra, ket, b, regularize, regulator, T0, Abody):
        pass

    @abc.abstractmethod
    def nlo_matrix_element(self, bra, ket, b, regularize, regulator, T0, Abody):
        pass

    @abc.abstractmethod
    def n2lo_matrix_element(self, bra, ket, b, regularize, regulator, T0, Abody):
        pass

    @abc.abstractmethod
    def n3lo_matrix_element(self, bra, ket, b, regularize, regulator, T0, Abody):
        pass

    @abc.abstractmethod
    def n4lo_matrix_element(self, bra, ket, b, regularize, regulator, T0, Abody):
        pass

def create_operator(name):
    """
    Returns a new operator for the name ("M1", "identity").
    """
    if(__package__==None or __package__==""):
        from M1Operator import M1Operator
        from IdentityOperator import IdentityOperator
    else:
        from .M1Operator import M1Operator
        from .IdentityOperator import IdentityOperator
    operators = {
            M1Operator.name: M1Operator,
            IdentityOperator.name: IdentityOperator,
            }
    if(name not in operators): raise UnrecognizedOperatorError("Unknown operator name: {}".format(name))
    return operators[name]()
