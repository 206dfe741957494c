#!/usr/bin/env python3
"""
Generates chiral EFT reduced matrix elements in the relative HO basis.

For each chiral order from LO up to the requested one, the contribution of that
order is written to
    <name>_2b_rel_<order>_N<Nmax>_J<Jmax>_hw<hw>_<time>.txt
and the sum of all orders to
    <name>_2b_rel_<order>_cumulative_N<Nmax>_J<Jmax>_hw<hw>_<time>.txt

Options may also be given in a TOML file (-c); explicit options take precedence.
"""
import os, time
import tomllib
from typing import Optional

import typer

if(__package__==None or __package__==""):
    from ChiralOperator import create_operator, UnrecognizedOperatorError
    from Order import orders_up_to
    from OscillatorParameter import OscillatorParameter
    from RelativeSpace import RelativeSpaceLSJT
    from RelativeOperator import RelativeOperatorLSJT
else:
    from .ChiralOperator import create_operator, UnrecognizedOperatorError
    from .Order import orders_up_to
    from .OscillatorParameter import OscillatorParameter
    from .RelativeSpace import RelativeSpaceLSJT
    from .RelativeOperator import RelativeOperatorLSJT

_defaults = {
        "name": "identity",
        "order": "lo",
        "hw": 20.0,
        "Nmax": 0,
        "Jmax": 0,
        "Tmin": 0,
        "Tmax": 0,
        "regularize": False,
        "regulator": 1.0,
        }

def generate_orders(name, order, hw, Nmax, Jmax, Tmin=0, Tmax=0, regularize=False, regulator=1.0, \
        path=".", time_str=None, verbose=False):
    """
    returns the list of written files, the cumulative file last
    """
    op = create_operator(name)
    orders = list(orders_up_to(order))
    if(time_str == None): time_str = str(int(time.time()))
    hw_str = "{:g}".format(hw)
    T0_min = max(Tmin, op.T0_min)
    T0_max = min(Tmax, op.T0)

    if(verbose):
        print("")
        print("Generating " + name + " matrix elements...")
        print("Beginning RelativeLSJT operator basis setup...")
    space = RelativeSpaceLSJT(Nmax=Nmax, Jmax=Jmax)
    b = OscillatorParameter(hw)
    cumulative = RelativeOperatorLSJT(space, J0=op.J0, G0=op.G0, T0_min=T0_min, T0_max=T0_max, verbose=verbose)
    if(verbose): cumulative.print_summary()

    files = []
    for key, o in orders:
        contribution = RelativeOperatorLSJT(space, J0=op.J0, G0=op.G0, T0_min=T0_min, T0_max=T0_max, verbose=verbose)
        contribution.set_chiral_op(op, o, b, regularize=regularize, regulator=regulator)
        cumulative = cumulative + contribution
        fn = "{}_2b_rel_{}_N{}_J{}_hw{}_{}.txt".format(name, key, Nmax, Jmax, hw_str, time_str)
        fn = os.path.join(path, fn)
        contribution.write_operator_file(fn)
        files.append(fn)

    fn = "{}_2b_rel_{}_cumulative_N{}_J{}_hw{}_{}.txt".format(name, order, Nmax, Jmax, hw_str, time_str)
    fn = os.path.join(path, fn)
    cumulative.write_operator_file(fn)
    files.append(fn)
    return files

def _read_config(filename):
    if(filename == None): return {}
    with open(filename, "rb") as f:
        config = tomllib.load(f)
    unknown = [key for key in config.keys() if key not in _defaults]
    if(len(unknown) > 0): raise ValueError("Unknown keys in {}: {}".format(filename, ", ".join(unknown)))
    return config

app = typer.Typer(
    name="chiral-rme",
    add_completion=False,
    help="Generates CEFT reduced matrix elements in HO basis.",
)

@app.command()
def main(
    name: Optional[str] = typer.Option(None, "-n", "--name", help="Name of operator."),
    order: Optional[str] = typer.Option(None, "-o", "--order", help="Chiral order of operator."),
    hw: Optional[float] = typer.Option(None, "-E", "--hw", help="Oscillator energy of basis."),
    Nmax: Optional[int] = typer.Option(None, "-N", "--Nmax", help="Nmax truncation of basis."),
    Jmax: Optional[int] = typer.Option(None, "-J", "--Jmax", help="Jmax truncation of basis."),
    Tmin: Optional[int] = typer.Option(None, "-t", "--Tmin", help="Minimum isospin of basis."),
    Tmax: Optional[int] = typer.Option(None, "-T", "--Tmax", help="Maximum isospin of basis."),
    regularize: bool = typer.Option(False, "--regularize", help="Regularize the exchange currents."),
    regulator: Optional[float] = typer.Option(None, "-R", "--regulator", help="Regulator length in fm."),
    config: Optional[str] = typer.Option(None, "-c", "--config", help="TOML file with the options above."),
    path: str = typer.Option(".", "--path", help="Output directory."),
    verbose: bool = typer.Option(True, "--verbose/--quiet", help="Print progress."),
):
    try:
        params = dict(_defaults)
        params.update(_read_config(config))
        given = {"name":name, "order":order, "hw":hw, "Nmax":Nmax, "Jmax":Jmax, "Tmin":Tmin, "Tmax":Tmax, \
                "regulator":regulator}
        params.update({key:val for key, val in given.items() if val != None})
        params["regularize"] = regularize or params["regularize"]
        generate_orders(path=path, verbose=verbose, **params)
    except (UnrecognizedOperatorError, ValueError, OSError) as e:
        typer.echo("Error: {}".format(e), err=True)
        raise typer.Exit(code=1)

if(__name__=="__main__"):
    app()
