#!/usr/bin/env python3
"""
Chiral orders. ORDERS is the order of iteration used for cumulative sums.
"""
import enum

@enum.unique
class Order(enum.IntEnum):
    lo = 0
    nlo = 1
    n2lo = 2
    n3lo = 3
    n4lo = 4
    full = 5

ORDERS = (
        ("lo", Order.lo),
        ("nlo", Order.nlo),
        ("n2lo", Order.n2lo),
        ("n3lo", Order.n3lo),
        ("n4lo", Order.n4lo),
        )

def order_from_name(name):
    if(name == "full"): return Order.full
    for key, order in ORDERS:
        if(key == name): return order
    raise ValueError("Unknown chiral order: {}".format(name))

def orders_up_to(name):
    """
    (name, Order) pairs from LO up to and including the given order
    """
    last = order_from_name(name)
    for key, order in ORDERS:
        if(order > last): return
        yield key, order
