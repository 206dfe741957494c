#!/usr/bin/env python3
"""
Radial integrals of pion-exchange kernels between HO radial functions.

The integrals are evaluated in oscillator units, rho = r / b. The HO radial
functions are not normalized here; multiply by coordinate_space_norm of the bra
and ket (see normalized) to get the matrix element.

With x = m rho (m: pion mass times oscillator length),
    Y(x) = exp(-x) / x
    T(x) = 1 + 1/x
    Z(x) = W(x) = 1 + 3/x + 3/x**2
and, when regularize is True, every kernel is multiplied by the local regulator
    f(rho) = (1 - exp(-(rho/R)**2))**6
with R the regulator length divided by the oscillator length.

T and Z come from the derivatives of the pion propagator (in units of m),
    d_i Y = - rhat_i T(x) Y(x)
    d_i d_j Y = ( rhat_i rhat_j - delta_ij / 3 ) Z(x) Y(x) + delta_ij / 3 Y(x),  x > 0
The d18 current (Z) and the d9 current (W) both carry the traceless part of
d_i d_j Y, so Z and W are the same function; the names follow the current
they appear in (Pastore et al., Phys. Rev. C 80, 034004 (2009)).
"""
from collections import namedtuple
import numpy as np
from scipy import integrate
from scipy.special import gamma, assoc_laguerre
if(__package__==None or __package__==""):
    import Constants
else:
    from . import Constants

RadialParameters = namedtuple("RadialParameters", ["bra_n", "bra_l", "ket_n", "ket_l", "regularize", "regulator", "pion_mass"])

def coordinate_space_norm(n, l, b=1.0):
    return np.sqrt( (2.0/b**3) * (gamma(n+1) / gamma(n+l+1.5)) )

def _u(rho, n, l):
    return rho**l * np.exp(-0.5*rho*rho) * assoc_laguerre(rho*rho, n, l+0.5)

def _yukawa(x):
    return np.exp(-x) / x

def _central(x):
    return 1.0 + 1.0/x

def _tensor(x):
    return 1.0 + 3.0/x + 3.0/(x*x)

def _regulator(rho, R):
    return (1.0 - np.exp(-np.square(np.divide(rho, R))))**6

def _kernel_integral(p, kernel):
    m = p.pion_mass
    R = np.float64(p.regulator)
    def integrand(rho):
        f = kernel(m*rho, rho)
        if(p.regularize): f *= _regulator(rho, R)
        return _u(rho, p.bra_n, p.bra_l) * f * _u(rho, p.ket_n, p.ket_l) * rho**2
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        res = integrate.quad(integrand, 0, np.inf, limit=200)
    return res[0]

def integral_ypi_r(p):
    """
    int drho rho**2 u' [rho Y(x)] u
    """
    return _kernel_integral(p, lambda x, rho: rho * _yukawa(x))

def integral_zpi_ypi_r(p):
    """
    int drho rho**2 u' [rho Z(x) Y(x)] u
    """
    return _kernel_integral(p, lambda x, rho: rho * _tensor(x) * _yukawa(x))

def integral_tpi_ypi_r(p):
    """
    int drho rho**2 u' [rho T(x) Y(x)] u
    """
    return _kernel_integral(p, lambda x, rho: rho * _central(x) * _yukawa(x))

def integral_wpi_r_ypi_r(p):
    """
    int drho rho**2 u' [rho W(x) Y(x)] u
    """
    return _kernel_integral(p, lambda x, rho: rho * _tensor(x) * _yukawa(x))

def integral_mpi_r_wpi_r_ypi_r(p):
    """
    int drho rho**2 u' [x rho W(x) Y(x)] u
    """
    return _kernel_integral(p, lambda x, rho: x * rho * _tensor(x) * _yukawa(x))

def integral_regularized_delta(p):
    """
    int drho rho**2 u' delta_R(rho) u,  delta_R(rho) = exp(-(rho/R)**2) / (pi**1.5 R**3)
    Without regularization, the point limit u'(0) u(0) / 4 pi (only l = 0 survives).
    """
    if(not p.regularize):
        if(p.bra_l != 0 or p.ket_l != 0): return 0.0
        return _u(0.0, p.bra_n, 0) * _u(0.0, p.ket_n, 0) / (4*np.pi)
    R = np.float64(p.regulator)
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        norm = 1.0 / (np.pi**1.5 * R**3)
        res = integrate.quad(lambda rho: _u(rho, p.bra_n, p.bra_l) * np.exp(-np.square(np.divide(rho, R))) * \
                _u(rho, p.ket_n, p.ket_l) * rho**2, 0, np.inf, limit=200)
        return norm * res[0]

def radial_integral(na, la, nb, lb, lam):
    """
    < na la | rho**lam | nb lb > with normalized HO radial functions (b = 1)
    """
    res = 0.0
    if((la+lb+lam)%2==1): raise ValueError('invalid')
    tau_a = max((lb-la+lam)//2, 0)
    tau_b = max((la-lb+lam)//2, 0)
    for sigma in range(max(0,na-tau_a,nb-tau_b), min(na, nb)+1):
        res += gamma((la+lb+lam)/2 + sigma + 1.5) / (gamma(sigma+1)*gamma(na-sigma+1)*gamma(nb-sigma+1)*\
                gamma(sigma+tau_a-na+1)*gamma(sigma+tau_b-nb+1))
    res *= (-1)**(na+nb) * np.sqrt(gamma(na+1)*gamma(nb+1) / (gamma(na+la+1.5)*gamma(nb+lb+1.5))) * gamma(tau_a+1) * gamma(tau_b+1)
    return res

def integral_mpi_r(ncp, nc, lcp, lc):
    """
    < ncp lcp | rho | nc lc >, the CM radius in CM oscillator units
    """
    if((lcp+lc+1)%2==1): return 0.0
    return radial_integral(ncp, lcp, nc, lc, 1)

def scaled_parameters(bra_n, bra_l, ket_n, ket_l, b, regularize, regulator):
    """
    b: oscillator length (fm), regulator: regulator length (fm)
    """
    return RadialParameters(bra_n, bra_l, ket_n, ket_l, regularize, regulator / b, Constants.pion_mass_fm * b)

def normalized(integral, p):
    return coordinate_space_norm(p.bra_n, p.bra_l) * coordinate_space_norm(p.ket_n, p.ket_l) * integral(p)

def main():
    p = RadialParameters(0, 0, 0, 0, True, 1.0, 0.7)
    print(normalized(integral_ypi_r, p), normalized(integral_regularized_delta, p))
    print(radial_integral(0, 0, 0, 1, 1), radial_integral(1, 0, 0, 1, 1))
if(__name__=="__main__"):
    main()
