from packages.core import TreeStateStore
from packages.core.nav import NavFile, NavFolder, build_nav, visible_rows


def _labels(navigation):
    rows = []
    for row in visible_rows(navigation):
        if isinstance(row.node, NavFolder):
            rows.append((row.depth, "folder", row.node.full_path))
        else:
            rows.append((row.depth, "file", row.node.link))
    return rows


def test_collapsed_tree_shows_top_level_rows_only(sample_tree):
    navigation = build_nav(sample_tree, TreeStateStore(), "/")
    assert _labels(navigation) == [
        (0, "file", "/docs/react-introduction"),
        (0, "folder", "core"),
        (0, "folder", "ecommerce"),
        (0, "folder", "init"),
    ]
    assert navigation.total == 10


def test_expanded_folder_lists_files_then_sub_folders(sample_tree):
    state = TreeStateStore()
    state.toggle("init")
    state.toggle("init/initial")
    navigation = build_nav(sample_tree, state, "/")
    assert _labels(navigation) == [
        (0, "file", "/docs/react-introduction"),
        (0, "folder", "core"),
        (0, "folder", "ecommerce"),
        (0, "folder", "init"),
        (1, "folder", "init/env-config"),
        (1, "folder", "init/initial"),
        (2, "file", "/docs/init/initial/README"),
        (2, "file", "/docs/init/initial/setup-prisma"),
        (1, "folder", "init/empty"),
    ]


def test_expanded_child_stays_hidden_under_collapsed_parent(sample_tree):
    state = TreeStateStore()
    state.toggle("init/initial")
    navigation = build_nav(sample_tree, state, "/")
    paths = [label for _, _, label in _labels(navigation)]
    assert "init/initial" not in paths
    assert "/docs/init/initial/README" not in paths

    init = navigation.folders[2]
    assert init.expanded is False
    assert init.sub_folders[1].expanded is True


def test_folder_exposes_children_counts_and_toggle(sample_tree):
    state = TreeStateStore()
    navigation = build_nav(sample_tree, state, "/docs/core/guard")
    core, ecommerce, init = navigation.folders

    assert [f.file.name for f in core.files] == ["decorator", "guard"]
    assert core.sub_folders == []
    assert (core.count, ecommerce.count, init.count) == (2, 4, 3)
    assert [s.full_path for s in init.sub_folders] == [
        "init/env-config",
        "init/initial",
        "init/empty",
    ]

    assert core.toggle() is True
    assert state.is_expanded("core") is True
    assert core.toggle() is False
    assert state.is_expanded("core") is False


def test_active_flag_marks_only_the_current_file(sample_tree):
    navigation = build_nav(sample_tree, TreeStateStore(), "/docs/core/guard")
    core = navigation.folders[0]
    decorator, guard = core.files

    assert isinstance(guard, NavFile)
    assert guard.active is True
    assert decorator.active is False
    assert navigation.root_files[0].active is False
