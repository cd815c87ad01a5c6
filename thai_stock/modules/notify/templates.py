from datetime import datetime
from html import escape

from thai_stock.modules.notify.schemas import SummaryRow


UP_COLOR = "#16a34a"
DOWN_COLOR = "#dc2626"


def render_rows(rows: list[SummaryRow]) -> str:
    if not rows:
        return (
            '<tr><td colspan="2" style="padding: 12px; text-align: center; color: #6b7280;">'
            "No stocks followed yet.</td></tr>"
        )

    html_rows = ""
    for row in rows:
        # live vs stored last price; there is no true previous close to compare against
        color = UP_COLOR if row.price >= row.stored_price else DOWN_COLOR
        html_rows += f"""
            <tr style="border-bottom: 1px solid #e5e7eb;">
                <td style="padding: 12px; font-weight: bold; color: #1f2937;">{escape(row.symbol)}</td>
                <td style="padding: 12px; text-align: right; font-weight: bold; color: {color};">{row.price:.2f} THB</td>
            </tr>"""
    return html_rows


def render_summary_html(rows: list[SummaryRow], generated_at: datetime, dashboard_url: str) -> str:
    return f"""<html>
  <body>
    <div style="font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; max-width: 600px; margin: 0 auto; background-color: #ffffff; border-radius: 8px; border: 1px solid #e5e7eb;">
      <div style="background-color: #2563eb; padding: 20px; text-align: center;">
        <h1 style="color: #ffffff; margin: 0; font-size: 24px;">Thai Stock Tracker</h1>
        <p style="color: #bfdbfe; margin: 5px 0 0;">Daily Summary</p>
      </div>
      <div style="padding: 20px;">
        <p style="color: #374151; margin-bottom: 20px;">Here is the latest summary of your followed stocks as of <strong>{generated_at:%Y-%m-%d %H:%M}</strong>:</p>
        <table style="width: 100%; border-collapse: collapse; margin-bottom: 20px;">
          <thead>
            <tr style="background-color: #f9fafb; text-align: left;">
              <th style="padding: 12px; border-bottom: 2px solid #e5e7eb; color: #4b5563;">Stock</th>
              <th style="padding: 12px; border-bottom: 2px solid #e5e7eb; color: #4b5563; text-align: right;">Price</th>
            </tr>
          </thead>
          <tbody>{render_rows(rows)}
          </tbody>
        </table>
        <div style="text-align: center;">
          <a href="{escape(dashboard_url)}" style="display: inline-block; background-color: #2563eb; color: #ffffff; padding: 10px 20px; text-decoration: none; border-radius: 5px; font-weight: bold;">View Dashboard</a>
        </div>
      </div>
      <div style="background-color: #f3f4f6; padding: 15px; text-align: center; font-size: 12px; color: #6b7280;">
        <p style="margin: 0;">Automated message from Thai Stock Tracker.</p>
      </div>
    </div>
  </body>
</html>"""
