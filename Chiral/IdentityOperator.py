#!/usr/bin/env python3
"""
Identity operator: a one-body operator at LO with unit reduced matrix elements,
    < bra || 1 || ket > = delta_{bra, ket}
It has no chiral corrections and is used to check the basis and file output.
"""
if(__package__==None or __package__==""):
    from Order import Order
    from ChiralOperator import ChiralOperator
else:
    from .Order import Order
    from .ChiralOperator import ChiralOperator

def lo_one_body(bra, ket, b, regularize, regulator, T0):
    if(T0 != 0): return 0.0
    return float(bra == ket)

class IdentityOperator(ChiralOperator):
    name = "identity"
    terms = {
            (Order.lo, "relative", 1): (lo_one_body,),
            (Order.lo, "relative", 2): (lo_one_body,),
            (Order.lo, "relative_cm", 1): (lo_one_body,),
            (Order.lo, "relative_cm", 2): (lo_one_body,),
            }
    def __init__(self, order=Order.lo):
        ChiralOperator.__init__(self, order=order, J0=0, G0=0, T0=0, T0_min=0)

    def lo_matrix_element(self, bra, ket, b, regularize, regulator, T0, Abody):
        return self._sum_terms(Order.lo, bra, ket, b, regularize, regulator, T0, Abody)

    def nlo_matrix_element(self, bra, ket, b, regularize, regulator, T0, Abody):
        return 0.0

    def n2lo_matrix_element(self, bra, ket, b, regularize, regulator, T0, Abody):
        return 0.0

    def n3lo_matrix_element(self, bra, ket, b, regularize, regulator, T0, Abody):
        return 0.0

    def n4lo_matrix_element(self, bra, ket, b, regularize, regulator, T0, Abody):
        return 0.0
