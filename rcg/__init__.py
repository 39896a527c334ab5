"""RusticChartGeom (RCG): geometría de gráficos de torta/dona y radar."""
