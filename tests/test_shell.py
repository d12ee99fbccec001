from __future__ import annotations

from eonje_swim.domain import Member, WorkType
from eonje_swim.errors import CalendarNotFoundError, RemoteStoreError
from eonje_swim.services.calendar import CalendarSnapshot
from eonje_swim.services.shell import ScheduleApp

TOKEN = "3f2b8c1e-9a7d-4b6e-8f00-1234567890ab"
OTHER = "8d1c0a9b-2e3f-4a5b-9c6d-abcdef012345"


def _app(context):
    notices = []
    addresses = []
    app = ScheduleApp(context, on_notice=notices.append, on_address=addresses.append)
    return app, notices, addresses


def _seed(repos, token=TOKEN, name="Platform team"):
    calendar = repos.calendars.add(token, name)
    repos.members.seed(calendar.id, "Jisoo", 0)
    repos.members.seed(calendar.id, "Minho", 1)
    return calendar


def test_open_loads_calendar_from_address(context, repos):
    _seed(repos)
    app, notices, _ = _app(context)

    assert app.open(f"https://eonjeswim.app/#{TOKEN}")
    assert app.state.title == "Platform team"
    assert [member.name for member in app.state.members] == ["Jisoo", "Minho"]
    assert not app.state.loading
    assert notices == []


def test_address_without_token_shows_entry_screen(context):
    app, _, _ = _app(context)
    assert not app.open("https://eonjeswim.app/")
    assert not app.state.has_calendar


def test_unknown_token_returns_to_entry_screen(context):
    app, notices, addresses = _app(context)

    assert not app.open(f"https://eonjeswim.app/#{TOKEN}")

    assert app.state.token is None
    assert app.state.members == []
    assert addresses[-1] == "https://eonjeswim.app/"
    assert notices[-1].message == "Calendar not found."
    assert notices[-1].level == "error"


def test_stale_load_is_discarded(context, repos):
    _seed(repos, TOKEN, "First")
    _seed(repos, OTHER, "Second")
    app, _, _ = _app(context)

    first = app.navigate(f"https://eonjeswim.app/#{TOKEN}")
    slow = app.fetch(TOKEN)
    second = app.navigate(f"https://eonjeswim.app/#{OTHER}")
    assert app.apply_load(second, app.fetch(OTHER))

    assert not app.apply_load(first, slow)
    assert app.state.title == "Second"
    assert not app.fail_load(first, CalendarNotFoundError(TOKEN))
    assert app.state.token == OTHER


def test_navigating_to_open_calendar_does_nothing(context, repos):
    _seed(repos)
    app, _, _ = _app(context)
    app.open(f"https://eonjeswim.app/#{TOKEN}")
    assert app.navigate(f"https://eonjeswim.app/#{TOKEN}") is None


def test_remote_failure_while_loading_is_reported(context):
    app, notices, _ = _app(context)
    generation = app.begin_load(TOKEN)
    assert app.fail_load(generation, RemoteStoreError("Failed to load calendar: offline"))
    assert not app.state.loading
    assert notices[-1].message == "Something went wrong while loading data."


def test_create_calendar_opens_it(context, repos):
    app, notices, addresses = _app(context)

    result = app.create_calendar("Design team")

    assert result.ok
    assert app.state.title == "Design team"
    assert app.state.members == []
    assert addresses[-1] == f"https://eonjeswim.app/#{app.state.token}"
    assert notices[-1].message == "New calendar created!"
    assert app.state.token in repos.calendars.rows


def test_create_calendar_failure(context, repos):
    repos.calendars.fail_create = True
    app, notices, _ = _app(context)
    result = app.create_calendar("Design team")
    assert not result.ok
    assert isinstance(result.error, RemoteStoreError)
    assert not app.state.has_calendar
    assert notices[-1].message == "Could not create the calendar."


def test_update_title(context, repos):
    _seed(repos)
    app, notices, _ = _app(context)
    app.open(f"https://eonjeswim.app/#{TOKEN}")

    assert app.update_title("Core team").ok
    assert repos.calendars.renamed == [(TOKEN, "Core team")]
    assert notices[-1].message == "Title updated."


def test_update_title_without_calendar_creates_one(context, repos):
    app, notices, _ = _app(context)
    assert app.update_title("Fresh").ok
    assert app.state.has_calendar
    assert notices[-1].message == "New calendar created!"


def test_status_update_is_optimistic_without_rollback(context, repos):
    _seed(repos)
    app, notices, _ = _app(context)
    app.open(f"https://eonjeswim.app/#{TOKEN}")
    member_id = app.state.members[0].id
    repos.schedules.fail_upsert = True

    result = app.update_status(member_id, "2025-12-18", WorkType.FULL_LEAVE)

    assert not result.ok
    assert app.state.members[0].statuses["2025-12-18"] is WorkType.FULL_LEAVE
    assert notices[-1].message == "Could not save the status."


def test_status_update_persists(context, repos):
    _seed(repos)
    app, _, _ = _app(context)
    app.open(f"https://eonjeswim.app/#{TOKEN}")
    member_id = app.state.members[1].id

    assert app.update_status(member_id, "2025-12-19", WorkType.REMOTE).ok
    assert repos.schedules.rows[(member_id, "2025-12-19")].work_type is WorkType.REMOTE


def test_save_members_replaces_roster(context, repos):
    _seed(repos)
    app, notices, _ = _app(context)
    app.open(f"https://eonjeswim.app/#{TOKEN}")
    working = [app.state.members[1], Member(id="member-new", name="Alex")]

    assert app.save_members(working).ok
    assert [member.name for member in app.state.members] == ["Minho", "Alex"]
    assert not any(member.is_provisional for member in app.state.members)
    assert notices[-1].message == "Team members saved."


def test_enter_link_validates_input(context):
    app, notices, addresses = _app(context)
    assert app.enter_link("abc") is None
    assert notices[-1].level == "error"
    assert addresses == []

    address = app.enter_link(f"  https://somewhere.else/#{TOKEN} ")
    assert address == f"https://eonjeswim.app/#{TOKEN}"
    assert addresses == [address]


def test_copy_link_writes_share_link(context, repos):
    _seed(repos)
    app, notices, _ = _app(context)
    copied = []
    assert not app.copy_link(copied.append).ok

    app.open(f"https://eonjeswim.app/#{TOKEN}")
    assert app.copy_link(copied.append).ok
    assert copied == [f"https://eonjeswim.app/#{TOKEN}"]
    assert notices[-1].message == "Share link copied!"
    assert notices[-1].timeout_ms == 3000


def test_grid_resolves_period(context, repos):
    _seed(repos)
    app, _, _ = _app(context)
    app.open(f"https://eonjeswim.app/#{TOKEN}")
    app.apply_status(app.state.members[0].id, "2025-12-19", WorkType.AM_HALF)
    app.set_period("2025-12-19", "2025-12-21")

    view = app.grid()

    assert view.dates == ["2025-12-19", "2025-12-20", "2025-12-21"]
    assert [status.work_type for status in view.rows[0].days] == [WorkType.AM_HALF, WorkType.HOLIDAY, WorkType.HOLIDAY]
    assert (view.stats[0].leave_count, view.stats[0].working_count) == (1, 1)


def test_grid_with_inverted_period_is_empty(context, repos):
    _seed(repos)
    app, _, _ = _app(context)
    app.open(f"https://eonjeswim.app/#{TOKEN}")
    app.set_period("2025-12-21", "2025-12-19")
    view = app.grid()
    assert view.dates == []
    assert all(row.days == [] for row in view.rows)


def test_apply_load_snapshot_directly(context, repos):
    calendar = repos.calendars.add(TOKEN, "Direct")
    app, _, _ = _app(context)
    generation = app.begin_load(TOKEN)
    assert app.apply_load(generation, CalendarSnapshot(calendar=calendar))
    assert app.state.title == "Direct"


def test_schedule_load_failure_is_reported_not_raised(context, repos, monkeypatch):
    _seed(repos)

    def broken(_member_ids):
        raise RemoteStoreError("Failed to load schedules: malformed row ('SICK' is not a valid WorkType).")

    monkeypatch.setattr(repos.schedules, "list_for_members", broken)
    app, notices, _ = _app(context)

    assert not app.open(f"https://eonjeswim.app/#{TOKEN}")
    assert not app.state.loading
    assert notices[-1].message == "Something went wrong while loading data."


def test_backend_half_of_create_leaves_state_alone(context, repos):
    app, notices, addresses = _app(context)
    _seed(repos)
    generation = app.navigate(f"https://eonjeswim.app/#{TOKEN}")

    calendar = app.calendars.create_calendar("Design team")

    assert app.state.token == TOKEN
    assert app.state.generation == generation
    assert notices == [] and addresses == []

    app.apply_created(calendar)
    assert app.state.token == calendar.token
    assert app.state.generation == generation + 1
    assert notices[-1].message == "New calendar created!"


def test_rename_applied_after_switching_calendars_only_notifies(context, repos):
    _seed(repos, TOKEN, "First")
    _seed(repos, OTHER, "Second")
    app, notices, _ = _app(context)
    app.open(f"https://eonjeswim.app/#{TOKEN}")

    app.calendars.rename_calendar(TOKEN, "Renamed")
    app.open(f"https://eonjeswim.app/#{OTHER}")
    app.apply_title(TOKEN, "Renamed")

    assert app.state.title == "Second"
    assert app.state.calendar.name == "Second"
    assert notices[-1].message == "Title updated."


def test_roster_applied_after_switching_calendars_is_ignored(context, repos):
    first = _seed(repos, TOKEN, "First")
    _seed(repos, OTHER, "Second")
    app, _, _ = _app(context)
    app.open(f"https://eonjeswim.app/#{TOKEN}")
    original = list(app.state.members)

    saved = app.roster.save_members(first.id, original, original[:1])
    app.open(f"https://eonjeswim.app/#{OTHER}")
    app.apply_members(first.id, saved)

    assert [member.calendar_id for member in app.state.members] == [2, 2]


def test_status_edited_during_roster_save_is_kept(context, repos):
    calendar = _seed(repos)
    app, _, _ = _app(context)
    app.open(f"https://eonjeswim.app/#{TOKEN}")
    original = list(app.state.members)

    saved = app.roster.save_members(calendar.id, original, original)
    app.apply_status(original[0].id, "2025-12-18", WorkType.REMOTE)
    app.apply_members(calendar.id, saved)

    assert app.state.members[0].statuses == {"2025-12-18": WorkType.REMOTE}


def test_failure_halves_report_without_touching_state(context, repos):
    _seed(repos)
    app, notices, _ = _app(context)
    app.open(f"https://eonjeswim.app/#{TOKEN}")
    error = RemoteStoreError("Failed to rename calendar: offline")

    assert not app.rename_failed(error).ok
    assert not app.members_failed(error).ok
    assert not app.status_failed(error).ok
    assert not app.creation_failed(error).ok
    assert app.state.title == "Platform team"
    assert [notice.message for notice in notices] == [
        "Could not update the title.",
        "Could not save team members.",
        "Could not save the status.",
        "Could not create the calendar.",
    ]


def test_failed_rename_keeps_previous_title(context, repos):
    _seed(repos)
    repos.calendars.fail_rename = True
    app, _, _ = _app(context)
    app.open(f"https://eonjeswim.app/#{TOKEN}")

    assert not app.update_title("Core team").ok
    assert app.state.title == "Platform team"
