"""
Tests for settings and the site write configuration
"""
import yaml


class TestSettings:
    """Tests for YAML settings"""

    def test_defaults_written_on_first_load(self, site_settings):
        import settings

        loaded = settings.load_settings()
        assert loaded['write']['required_tag'] is False
        with open(settings.CONFIG_FILE) as f:
            assert yaml.safe_load(f)['write']['required_tag'] is False

    def test_set_write_settings(self, site_settings):
        import settings

        loaded = site_settings(required_tag=True)
        assert loaded['write']['required_tag'] is True
        assert settings.reload_conf()['write']['required_tag'] is True

    def test_invalid_write_settings_rejected(self, site_settings):
        import settings

        success, errors = settings.set_write_settings({'required_tag': 'yes'})
        assert success is False
        assert [e['path'] for e in errors] == ['write/required_tag']
        assert settings.load_settings()['write']['required_tag'] is False

    def test_partial_file_merged_with_defaults(self, site_settings):
        import settings

        with open(settings.CONFIG_FILE, 'w') as f:
            yaml.dump({'write': {}, 'theme': 'dark'}, f)
        loaded = settings.reload_conf()
        assert loaded['write']['required_tag'] is False
        assert loaded['theme'] == 'dark'


class TestSiteInfoService:
    """Tests for the tag required flag"""

    def test_get_tag_required(self, site_settings):
        from services.siteinfo_service import get_tag_required

        assert get_tag_required() is False
        site_settings(required_tag=True)
        assert get_tag_required() is True

    def test_unreadable_settings_count_as_false(self, site_settings):
        import settings
        from services.siteinfo_service import get_tag_required

        with open(settings.CONFIG_FILE, 'w') as f:
            f.write('write: [unclosed')
        settings._cached_settings = None
        assert get_tag_required() is False
