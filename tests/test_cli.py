from uarsim.cli import build_parser, main


def test_parser_reads_options():
    args = build_parser().parse_args(["--signal", "sine", "--ticks", "4", "--a", "1", "2", "3"])
    assert args.signal == "sine"
    assert args.ticks == 4
    assert args.a == [1.0, 2.0, 3.0]


def test_main_prints_one_line_per_tick(capsys):
    assert main(["--ticks", "3", "--seed", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    assert lines[0] == "time\toutput\tsetpoint\terror"
    assert [line.split("\t")[0] for line in lines[1:]] == ["0", "3", "6"]


def test_main_is_deterministic_with_seed(capsys):
    main(["--ticks", "5", "--seed", "9", "--signal", "square"])
    first = capsys.readouterr().out
    main(["--ticks", "5", "--seed", "9", "--signal", "square"])
    second = capsys.readouterr().out
    assert first == second


def test_main_rejects_zero_gains(capsys):
    assert main(["--kp", "0", "--ki", "0", "--kd", "0"]) == 1
    assert "error" in capsys.readouterr().err


def test_main_rejects_bad_interval(capsys):
    assert main(["--interval", "0"]) == 1
    assert "interval" in capsys.readouterr().err


def test_main_rejects_zero_plant_polynomial(capsys):
    assert main(["--b", "0", "0", "0"]) == 1
    assert capsys.readouterr().out == ""