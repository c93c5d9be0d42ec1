"""
Unit tests for the file locator module.

Tests name matching, directory exclusions, repository attribution and
statistics of the FileLocator class.
"""

import os
import shutil
import tempfile
from pathlib import Path
import pytest

from ccfind.models.config import WorkspaceConfig
from ccfind.tools.file_locator import FileLocator, name_matches, strip_extension


class TestFileLocator:
    """Test cases for the FileLocator class."""
    
    def setup_method(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.root = Path(self.temp_dir) / "cc_app"
        self._create_test_structure()
        
        self.config = WorkspaceConfig(root=str(self.root))
        self.locator = FileLocator(self.config)
    
    def teardown_method(self):
        """Clean up test fixtures."""
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)
    
    def _create_test_structure(self):
        """Create a workspace with several repositories and build output."""
        test_files = [
            "cc.v3/src/components/MapContainer.tsx",
            "cc.v3/src/components/Legend.tsx",
            "cc.v3/node_modules/lib/MapContainer.js",
            "cc.v3/dist/MapContainer.js",
            "cc.v3/.git/MapContainer",
            "cc.v3/distance/MapContainerUtils.ts",
            "curbcut-api/src/services/UserService.py",
            "npm-ui/src/UserService.ts",
            "npm-ui/Makefile",
            "npm-ui/.env",
            "TopLevelMapContainer.md",
        ]
        
        for file_path in test_files:
            full_path = self.root / file_path
            full_path.parent.mkdir(parents=True, exist_ok=True)
            full_path.write_text(f"Content of {file_path}")
    
    def _paths(self, matches):
        return sorted(f"{m.repo_name}/{m.relative_path}" for m in matches)
    
    def test_single_match(self):
        matches = self.locator.locate(str(self.root), "Legend")
        
        assert len(matches) == 1
        match = matches[0]
        assert match.repo_name == "cc.v3"
        assert match.relative_path == "src/components/Legend.tsx"
        assert match.full_path == str(self.root / "cc.v3/src/components/Legend.tsx")
    
    def test_case_insensitive(self):
        matches = self.locator.locate(str(self.root), "legend")
        assert self._paths(matches) == ["cc.v3/src/components/Legend.tsx"]
    
    def test_excluded_directories(self):
        """node_modules, dist and .git are never descended into."""
        matches = self.locator.locate(str(self.root), "MapContainer")
        
        assert self._paths(matches) == [
            "cc.v3/distance/MapContainerUtils.ts",
            "cc.v3/src/components/MapContainer.tsx",
        ]
    
    def test_exclusions_match_whole_components(self):
        """A directory merely containing 'dist' in its name is still searched."""
        matches = self.locator.locate(str(self.root), "MapContainerUtils")
        assert self._paths(matches) == ["cc.v3/distance/MapContainerUtils.ts"]
    
    def test_excluded_repository_as_search_root(self):
        """A repository folder with an excluded name yields nothing, even when searched directly."""
        widget = self.root / "dist" / "app" / "Widget.ts"
        widget.parent.mkdir(parents=True)
        widget.write_text("export {}")
        
        assert self.locator.locate(str(self.root / "dist"), "Widget") == []
        assert self.locator.locate(str(self.root), "Widget") == []
    
    def test_file_with_excluded_name(self):
        (self.root / "cc.v3" / "src" / "dist").write_text("build marker")
        (self.root / "cc.v3" / "src" / "node_modules").write_text("not a directory")
        
        assert self.locator.locate(str(self.root), "dist") == []
        assert self.locator.locate(str(self.root), "node_mod") == []
    
    def test_files_outside_repositories_are_dropped(self):
        matches = self.locator.locate(str(self.root), "TopLevel")
        assert matches == []
    
    def test_matches_across_repositories(self):
        matches = self.locator.locate(str(self.root), "UserService")
        
        assert self._paths(matches) == [
            "curbcut-api/src/services/UserService.py",
            "npm-ui/src/UserService.ts",
        ]
    
    def test_search_root_narrows_results(self):
        matches = self.locator.locate(str(self.root / "npm-ui"), "UserService")
        
        assert len(matches) == 1
        assert matches[0].repo_name == "npm-ui"
        assert matches[0].relative_path == "src/UserService.ts"
    
    def test_extension_is_not_matched(self):
        """Only the name without its extension is compared."""
        assert self.locator.locate(str(self.root), "tsx") == []
    
    def test_file_without_extension(self):
        matches = self.locator.locate(str(self.root), "makefile")
        assert self._paths(matches) == ["npm-ui/Makefile"]
    
    def test_short_fragment_over_matches(self):
        """Substring matching accepts any name containing the fragment."""
        matches = self.locator.locate(str(self.root), "e")
        paths = self._paths(matches)
        
        assert "cc.v3/src/components/Legend.tsx" in paths
        assert "npm-ui/src/UserService.ts" in paths
        assert "npm-ui/Makefile" in paths
    
    def test_no_matches(self):
        assert self.locator.locate(str(self.root), "DoesNotExist") == []
    
    def test_missing_search_root(self):
        assert self.locator.locate(str(self.root / "missing"), "x") == []
        assert self.locator.get_stats()['errors'] == 1
    
    def test_empty_fragment_rejected(self):
        with pytest.raises(ValueError):
            self.locator.locate(str(self.root), "")
    
    def test_symlinks_not_reported(self):
        target = self.root / "cc.v3" / "src" / "components" / "Legend.tsx"
        os.symlink(target, self.root / "npm-ui" / "LegendLink.tsx")
        
        matches = self.locator.locate(str(self.root), "Legend")
        
        assert self._paths(matches) == ["cc.v3/src/components/Legend.tsx"]
    
    def test_round_trip_invariant(self):
        for match in self.locator.locate(str(self.root), "s"):
            assert os.path.join(str(self.root), match.repo_name, match.relative_path) == match.full_path
            assert os.path.isfile(match.full_path)
    
    def test_sorted_results(self):
        config = WorkspaceConfig(root=str(self.root), sort_results=True)
        matches = FileLocator(config).locate(str(self.root), "UserService")
        
        assert [m.full_path for m in matches] == sorted(m.full_path for m in matches)
    
    def test_custom_exclusions(self):
        config = WorkspaceConfig(root=str(self.root), exclude_dirs=["src"])
        matches = FileLocator(config).locate(str(self.root), "MapContainer")
        
        paths = self._paths(matches)
        assert "cc.v3/node_modules/lib/MapContainer.js" in paths
        assert "cc.v3/src/components/MapContainer.tsx" not in paths
    
    def test_stats_tracking(self):
        self.locator.reset_stats()
        self.locator.locate(str(self.root), "UserService")
        
        stats = self.locator.get_stats()
        
        assert stats['files_matched'] == 2
        assert stats['files_scanned'] >= 6
        assert stats['directories_traversed'] > 0
        assert stats['directories_ignored'] == 3
        assert stats['errors'] == 0


class TestNameMatching:
    """Test cases for the name helpers."""
    
    def test_strip_extension(self):
        assert strip_extension("MapContainer.tsx") == "MapContainer"
        assert strip_extension("archive.tar.gz") == "archive.tar"
        assert strip_extension("Makefile") == "Makefile"
        assert strip_extension(".env") == ""
    
    def test_equal_or_contains(self):
        assert name_matches("MapContainer.tsx", "mapcontainer")
        assert name_matches("MapContainerUtils.ts", "MapContainer")
        assert not name_matches("Map.tsx", "MapContainer")
    
    def test_dotfile_never_matches_its_name(self):
        assert not name_matches(".env", "env")
