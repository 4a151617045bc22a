import main


def test_main_prints_every_run(monkeypatch, capsys):
    monkeypatch.setenv("NOTIFICATION_FORMAT", "text")
    monkeypatch.setenv("NOTIFICATION_ECHO", "true")
    monkeypatch.setattr(main, "configure_logging", lambda level, debug: None)

    main.main()

    out = capsys.readouterr().out
    assert out.count("Structure information:") == 4
    assert out.count("Interaction results:") == 4
    assert (
        "The sender STAMEC Manufacturing send the message "
        "'Please, provide me an estimation cost for Part Number 01' to the receiver OMCR Supplier"
    ) in out
    assert "The receiver STAMEC Manufacturing received the message" in out
    assert "DEMONSTRATION COMPLETE" in out


def test_scenario_without_echo_still_prints_structure(monkeypatch, capsys):
    monkeypatch.setenv("NOTIFICATION_ECHO", "false")

    runs = main.run_purchase_quotation_scenario()

    out = capsys.readouterr().out
    assert len(runs) == 4
    assert "Structure information:" in out
    assert "The sender" not in out
