from raids.notes import (extract_raid_hour, is_bonus_note, parse_featured_names,
                         parse_raid_hour_time, raid_hour_keywords)


def test_raid_hour_time():
    text = "Raid Hour: Wednesday, November 12, from 6:00 p.m. to 7:00 p.m. local time"
    assert parse_raid_hour_time(text) == "6:00 p.m. to 7:00 p.m. local time"


def test_raid_hour_time_without_dots():
    assert parse_raid_hour_time("from 6:00 pm to 7:00 pm") == "6:00 pm to 7:00 pm local time"


def test_featured_names():
    text = "Join a Raid Hour featuring Reshiram, Zekrom, and Kyurem from 6:00 p.m. to 7:00 p.m. local time."
    assert parse_featured_names(text) == ["Reshiram", "Zekrom", "Kyurem"]


def test_featured_names_up_to_period():
    assert parse_featured_names("A Raid Hour featuring Mewtwo and Mew.") == ["Mewtwo", "Mew"]


def test_extract_raid_hour_requires_phrase():
    assert extract_raid_hour("featuring Mewtwo from 6:00 p.m. to 7:00 p.m.") == (None, [])


def test_raid_hour_keywords():
    assert raid_hour_keywords("Raid Hour featuring Pokémon in five-star raids") == {"tier 5"}
    assert raid_hour_keywords("Shadow and Mega Raid Hour") == {"shadow", "mega"}
    assert raid_hour_keywords("Raid Hour") == set()


def test_bonus_note():
    assert is_bonus_note("Defeat Black Kyurem in raids to earn Fusion Energy.")
    assert is_bonus_note("Mega Rayquaza knows the Adventure Effect move Dragon Ascent.")
    assert not is_bonus_note("")
    assert not is_bonus_note("Catch more Pokémon during the event.")
