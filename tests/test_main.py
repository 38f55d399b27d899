from kdtreex.__main__ import QUICKSTART, main


def test_main_prints_quickstart(capsys):
    main()

    out = capsys.readouterr().out
    assert out.startswith(QUICKSTART)
    assert "from kdtreex import build, nearest" in out
    assert "KDTREEX_PRECISION" in out
