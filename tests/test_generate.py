import os

from typer.testing import CliRunner

from Chiral.generate import app, generate_orders
from Chiral.RelativeOperator import RelativeOperatorLSJT
from Chiral.RelativeSpace import RelativeStateLSJT


def test_generate_writes_one_file_per_order_and_the_cumulative_sum(tmp_path):
    files = generate_orders("identity", "nlo", 20.0, 2, 1, path=str(tmp_path), time_str="0")
    names = [os.path.basename(fn) for fn in files]
    assert names == [
            "identity_2b_rel_lo_N2_J1_hw20_0.txt",
            "identity_2b_rel_nlo_N2_J1_hw20_0.txt",
            "identity_2b_rel_nlo_cumulative_N2_J1_hw20_0.txt",
            ]
    cumulative = RelativeOperatorLSJT()
    cumulative.read_operator_file(files[-1])
    s_wave = RelativeStateLSJT(1, 0, 0, 0, 1)
    assert cumulative.get_me(0, s_wave, s_wave) == 1.0
    nlo = RelativeOperatorLSJT()
    nlo.read_operator_file(files[1])
    assert nlo.count_nonzero(0) == 0


def test_m1_isospin_range_is_clipped_to_the_operator(tmp_path):
    files = generate_orders("M1", "nlo", 20.0, 0, 1, Tmin=0, Tmax=3, regularize=True, \
            path=str(tmp_path), time_str="1")
    op = RelativeOperatorLSJT()
    op.read_operator_file(files[-1])
    assert (op.J0, op.T0_min, op.T0_max) == (1, 0, 1)
    deuteron = RelativeStateLSJT(0, 0, 1, 1, 0)
    assert op.get_me(0, deuteron, deuteron) != 0.0


def test_cli(tmp_path):
    runner = CliRunner()
    res = runner.invoke(app, ["-n", "identity", "-o", "n2lo", "-N", "2", "-J", "1", "-E", "16", \
            "--path", str(tmp_path), "--quiet"])
    assert res.exit_code == 0, res.output
    written = sorted(os.listdir(tmp_path))
    assert len(written) == 4
    assert all(fn.startswith("identity_2b_rel_") for fn in written)
    assert any("_n2lo_cumulative_N2_J1_hw16_" in fn for fn in written)


def test_cli_reads_config(tmp_path):
    config = tmp_path / "run.toml"
    config.write_text('name = "identity"\norder = "lo"\nNmax = 2\nJmax = 0\nhw = 25.0\n')
    out = tmp_path / "out"
    out.mkdir()
    runner = CliRunner()
    # explicit options win over the file
    res = runner.invoke(app, ["-c", str(config), "-J", "1", "--path", str(out), "--quiet"])
    assert res.exit_code == 0, res.output
    written = os.listdir(out)
    assert len(written) == 2
    assert all("_N2_J1_hw25_" in fn for fn in written)


def test_cli_rejects_unknown_operator(tmp_path):
    runner = CliRunner()
    res = runner.invoke(app, ["-n", "E2", "--path", str(tmp_path), "--quiet"])
    assert res.exit_code == 1
    assert os.listdir(tmp_path) == []


def test_cli_rejects_unknown_config_keys(tmp_path):
    config = tmp_path / "run.toml"
    config.write_text('name = "identity"\nhbar_omega = 20.0\n')
    runner = CliRunner()
    res = runner.invoke(app, ["-c", str(config), "--path", str(tmp_path), "--quiet"])
    assert res.exit_code == 1
