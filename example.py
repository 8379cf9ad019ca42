import asyncio
from datetime import date

from fx_chart import FxChart, build_figure

print(FxChart.__version__)  # 0.1.0

# Default usage: reads ./exchangerate.db (or FX_CHART_DB_URL) read-only
fx = FxChart()

success, error = fx.connection()  # => to check the provider is reachable
if not success:
    print(error)
    exit(1)

# Currencies offered by the provider, sorted for display
print(fx.currencies())
# => ['EUR', 'USD']

# One-off load for a currency and an inclusive date range
series = fx.load("USD", date(2024, 1, 1), date(2024, 1, 3))
print(series)
# => (RateObservation(date='2024-01-01', rate=1.0), RateObservation(date='2024-01-02', rate=1.02))

chart = fx.render(series)
print(chart.state, chart.y_bounds, chart.tick_labels())
# => ChartState.POPULATED (0.5, 1.52) ['2024-01-01', '2024-01-02']

# Screen-style usage: a session owns the selection and applies loads as they complete
session = fx.session()
session.add_listener(lambda new_chart: print("chart updated:", new_chart.state))
asyncio.run(session.refresh_currencies())
session.select_currency("USD")
session.set_start_date("2024-01-01")
session.set_end_date("2024-01-03")
result = asyncio.run(session.load())
print(result.status, result.diagnostic)

build_figure(session.chart).write_html("exchange_rate_history.html")
fx.close()
