#!/usr/bin/env python3
import numpy as np
if(__package__==None or __package__==""):
    import Constants
else:
    from . import Constants

class OscillatorParameter:
    """
    Oscillator lengths of the relative and center-of-mass motion of two nucleons
    for a given oscillator energy hw (MeV).
        b_rel = sqrt( (hc)**2 / (mu hw) ),  mu = m_nucl / 2
        b_cm  = sqrt( (hc)**2 / (2 m_nucl hw) )
    """
    __slots__ = ("_hw", "_brel", "_bcm")
    def __init__(self, hw):
        if(hw <= 0): raise ValueError("hw has to be positive, hw = {}".format(hw))
        object.__setattr__(self, "_hw", float(hw))
        object.__setattr__(self, "_brel", np.sqrt(Constants.hc**2 / (Constants.reduced_nucleon_mass_MeV * hw)))
        object.__setattr__(self, "_bcm", np.sqrt(Constants.hc**2 / (2*Constants.m_nucl * hw)))
    def __setattr__(self, key, value):
        raise AttributeError("OscillatorParameter is immutable")
    def __repr__(self):
        return "OscillatorParameter(hw={})".format(self._hw)
    def hw(self):
        return self._hw
    def relative(self):
        return self._brel
    def cm(self):
        return self._bcm

def main():
    b = OscillatorParameter(20)
    print(b, b.relative(), b.cm())
if(__name__=="__main__"):
    main()
