from apps.cli.run import summarize


def test_summarize():
    results = [
        {"success": True, "guesses": 4, "pool_sizes": [5, 2, 1, 1]},
        {"success": False, "guesses": 6, "pool_sizes": [5, 3, 3, 2, 2, 2]},
    ]
    s = summarize(results)
    assert s["games"] == 2
    assert s["win_rate"] == 0.5
    assert s["mean_guesses_won"] == 4.0
    assert s["mean_final_pool"] == 1.5


def test_summarize_empty():
    assert summarize([])["games"] == 0
