import plotly.graph_objects as go

from typing import Any
from txdash.app.naming_conventions import ChartFields


def _empty_figure(message: str) -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(
        text=message,
        showarrow=False,
        x=0.5,
        y=0.5,
        xref='paper',
        yref='paper',
        font=dict(size=14, color='#6c757d'),
    )
    fig.update_layout(xaxis_visible=False, yaxis_visible=False)
    return fig


def _split_dataset(dataset: Any) -> tuple[list, list[dict]]:
    """
    Get the labels and the series of a chart dataset, as sent by the backend. Returns empty lists when the dataset is
    not of the form {"labels": [...], "datasets": [{"label": ..., "data": [...]}, ...]}.
    """
    if not isinstance(dataset, dict):
        return [], []
    labels = dataset.get(ChartFields.LABELS.value) or []
    series = dataset.get(ChartFields.DATASETS.value) or []
    if not isinstance(labels, list) or not isinstance(series, list):
        return [], []
    series = [s for s in series if isinstance(s, dict) and isinstance(s.get(ChartFields.DATA.value), list)]
    return labels, series


def bar_plot_from_dataset(dataset: Any, title: str) -> go.Figure:
    """
    Plot a bar chart of a chart dataset, one bar trace per series of the dataset

    Parameters
    ----------
    dataset : Any
        The chart dataset as received from the backend
    title : str
        The title of the plot

    Returns
    -------
    go.Figure
        The bar plot, or an empty figure with a message if the dataset has no series
    """
    labels, series = _split_dataset(dataset)
    if not series:
        return _empty_figure('No chart data available.')

    fig = go.Figure()
    for s in series:
        fig.add_trace(
            go.Bar(
                x=labels,
                y=s[ChartFields.DATA.value],
                name=s.get(ChartFields.LABEL.value),
                text=s[ChartFields.DATA.value],
                textposition='auto'
            )
        )
    fig.update_layout(
        title=title,
        showlegend=len(series) > 1 or series[0].get(ChartFields.LABEL.value) is not None,
    )
    return fig


def pie_plot_from_dataset(dataset: Any, title: str) -> go.Figure:
    """
    Plot a pie chart of the first series of a chart dataset

    Parameters
    ----------
    dataset : Any
        The chart dataset as received from the backend
    title : str
        The title of the plot

    Returns
    -------
    go.Figure
        The pie plot, or an empty figure with a message if the dataset has no series
    """
    labels, series = _split_dataset(dataset)
    if not series:
        return _empty_figure('No chart data available.')

    fig = go.Figure(
        go.Pie(
            labels=labels,
            values=series[0][ChartFields.DATA.value],
            textinfo='label+percent',
            hole=0.3,
            name=series[0].get(ChartFields.LABEL.value)
        )
    )
    fig.update_layout(title_text=title)
    return fig
