# frontend/mfg_ui/analytics.py
"""Canned analytics datasets and their plotly figures (read-only, no store access)."""
import pandas as pd
import plotly.graph_objects as go

COLORS = ["#0088FE", "#00C49F", "#FFBB28", "#FF8042", "#8884d8", "#82ca9d"]

PRODUCTION = [
    {"month": "Jan", "production": 65, "target": 70},
    {"month": "Feb", "production": 59, "target": 65},
    {"month": "Mar", "production": 80, "target": 75},
    {"month": "Apr", "production": 81, "target": 80},
    {"month": "May", "production": 56, "target": 60},
    {"month": "Jun", "production": 55, "target": 55},
    {"month": "Jul", "production": 40, "target": 45},
]

DEFECT_CATEGORIES = [
    {"category": "Manufacturing", "value": 35},
    {"category": "Design", "value": 15},
    {"category": "Material", "value": 20},
    {"category": "Electrical", "value": 10},
    {"category": "Other", "value": 5},
]

MATERIAL_DISTRIBUTION = [
    {"material": "Stainless Steel", "value": 40},
    {"material": "Copper Wire", "value": 25},
    {"material": "Nylon Polymer", "value": 15},
    {"material": "Silicon Wafer", "value": 12},
    {"material": "Aluminum Sheets", "value": 8},
]

DEPARTMENT_PRODUCTIVITY = [
    {"department": "Production", "score": 85},
    {"department": "R&D", "score": 70},
    {"department": "QA", "score": 90},
    {"department": "Logistics", "score": 75},
    {"department": "Admin", "score": 65},
]

KPIS = [
    {"label": "On-Time Delivery", "value": "92%", "delta": "+2% from last month"},
    {"label": "Defect Rate", "value": "3.2%", "delta": "-0.5% from last month", "inverse": True},
    {"label": "Production Efficiency", "value": "87%", "delta": "+1% from last month"},
    {"label": "Material Utilization", "value": "94%", "delta": "+3% from last month"},
]

MARGIN = dict(l=10, r=10, t=30, b=10)


def frame(rows) -> pd.DataFrame:
    return pd.DataFrame(list(rows))


def production_figure(df: pd.DataFrame, height: int = 320) -> go.Figure:
    fig = go.Figure()
    fig.add_bar(x=df["month"], y=df["production"], name="Actual", marker_color="#8884d8")
    fig.add_bar(x=df["month"], y=df["target"], name="Target", marker_color="#82ca9d")
    fig.update_layout(barmode="group", margin=MARGIN, height=height)
    return fig


def share_figure(df: pd.DataFrame, names: str, values: str = "value", height: int = 320) -> go.Figure:
    fig = go.Figure(data=[go.Pie(
        labels=df[names], values=df[values],
        marker=dict(colors=COLORS[: len(df)]),
        texttemplate="%{label}: %{percent:.0%}",
        textposition="outside",
    )])
    fig.update_layout(margin=MARGIN, height=height, showlegend=False)
    return fig


def productivity_figure(df: pd.DataFrame, height: int = 320) -> go.Figure:
    fig = go.Figure(data=[go.Bar(
        x=df["score"], y=df["department"], orientation="h",
        name="Productivity Score", marker_color="#8884d8",
        text=df["score"], textposition="outside", texttemplate="%{text:.0f}",
    )])
    fig.update_xaxes(range=[0, 100])
    fig.update_layout(margin=MARGIN, height=height)
    return fig


def empty_figure(height: int = 320, text: str = "No data") -> go.Figure:
    fig = go.Figure()
    fig.update_layout(margin=MARGIN, height=height)
    fig.add_annotation(text=text, x=0.5, y=0.5, xref="paper", yref="paper", showarrow=False)
    return fig
