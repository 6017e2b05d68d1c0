"""
State map tests — validation, filtering and figure content.
"""

import logging

import numpy as np
import pandas as pd
import plotly.graph_objects as go
import pytest

from fars import InvalidInput, InvalidState, map_state, plot_state_map


class TestMapState:

    def test_returns_figure_with_state_points(self, data_dir):
        fig = map_state(1, 2013, data_dir=data_dir, show=False)

        assert isinstance(fig, go.Figure)
        trace = fig.data[0]
        assert isinstance(trace, go.Scattergeo)
        assert len(trace.lat) == 3
        assert 'Alabama' in fig.layout.title.text
        assert '2013' in fig.layout.title.text

    def test_accepts_loosely_typed_input(self, data_dir):
        fig = map_state('1', 2013.0, data_dir=data_dir, show=False)
        assert len(fig.data[0].lat) == 3

    def test_sentinel_points_are_excluded(self, data_dir):
        fig = map_state(6, 2013, data_dir=data_dir, show=False)
        trace = fig.data[0]
        assert len(trace.lon) == 1
        assert trace.lon[0] == pytest.approx(-118.2)
        lon_range = fig.layout.geo.lonaxis.range
        assert lon_range[1] < 0

    def test_unknown_state_raises(self, data_dir):
        with pytest.raises(InvalidState, match='invalid STATE number: 99'):
            map_state(99, 2013, data_dir=data_dir, show=False)

    def test_fractional_state_code_is_not_a_match(self, write_year, make_record, tmp_path):
        write_year(2013, [make_record(state=1.9)])
        with pytest.raises(InvalidState, match='invalid STATE number: 1'):
            map_state(1, 2013, data_dir=tmp_path, show=False)

    def test_missing_year_raises(self, data_dir):
        with pytest.raises(FileNotFoundError):
            map_state(1, 2099, data_dir=data_dir, show=False)

    def test_bad_state_code_raises(self, data_dir):
        with pytest.raises(InvalidInput):
            map_state('Alabama', 2013, data_dir=data_dir, show=False)

    def test_all_coordinates_missing(self, write_year, make_record, tmp_path):
        write_year(2015, [
            make_record(state=2, lon=999.99, lat=99.99),
            make_record(state=2, lon=988.88, lat=45.0),
        ])

        fig = map_state(2, 2015, data_dir=tmp_path, show=False)

        assert len(fig.data[0].lat or ()) == 0
        assert fig.layout.geo.lonaxis.range is None
        assert fig.layout.geo.lataxis.range is None

    def test_writes_html(self, data_dir, tmp_path):
        out = tmp_path / 'maps' / 'al_2014.html'
        map_state(1, 2014, data_dir=data_dir, output_path=out, show=False)
        assert out.exists()
        assert 'plotly' in out.read_text(encoding='utf-8').lower()

    def test_defaults_to_working_directory(self, data_dir, monkeypatch):
        monkeypatch.chdir(data_dir)
        fig = map_state(6, 2014, show=False)
        assert len(fig.data[0].lat) == 2

    def test_logs_plotted_count(self, data_dir, caplog):
        with caplog.at_level(logging.INFO, logger='fars'):
            map_state(6, 2013, data_dir=data_dir, show=False)
        assert any('1/2' in r.getMessage() for r in caplog.records)


class TestPlotStateMap:

    def test_extent_is_padded(self):
        df = pd.DataFrame({'LONGITUD': [-100.0, -90.0], 'LATITUDE': [30.0, 40.0]})
        fig = plot_state_map(df, 48, 2014, margin=1.0)
        assert list(fig.layout.geo.lonaxis.range) == [-101.0, -89.0]
        assert list(fig.layout.geo.lataxis.range) == [29.0, 41.0]

    def test_nan_rows_dropped(self):
        df = pd.DataFrame({
            'LONGITUD': [-100.0, np.nan, -95.0],
            'LATITUDE': [30.0, 35.0, np.nan],
        })
        fig = plot_state_map(df, 48, 2014)
        assert list(fig.data[0].lon) == [-100.0]

    def test_case_numbers_in_hover(self):
        df = pd.DataFrame({'LONGITUD': [-100.0], 'LATITUDE': [30.0], 'ST_CASE': [480001]})
        fig = plot_state_map(df, 48, 2014)
        assert list(fig.data[0].customdata) == [480001]
        assert 'Case' in fig.data[0].hovertemplate

    def test_unknown_state_title(self):
        df = pd.DataFrame({'LONGITUD': [-100.0], 'LATITUDE': [30.0]})
        fig = plot_state_map(df, 97, 2014)
        assert fig.layout.title.text.startswith('State 97')

    def test_missing_columns_raise(self):
        with pytest.raises(ValueError, match='LATITUDE'):
            plot_state_map(pd.DataFrame({'LONGITUD': [1.0]}), 1, 2014)
