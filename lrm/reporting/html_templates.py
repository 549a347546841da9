"""HTML report template generation with jQuery DataTables."""
from typing import Optional

_NAV_PAGES = [
    ("matches", "✓ Matches"),
    ("only_in_first", "◀ Only in First"),
    ("only_in_second", "▶ Only in Second"),
]


def get_html_template(
    title: str,
    columns: list[str],
    rows: list[list],
    description: str = "",
    default_order: Optional[list[list[int | str]]] = None,
    csv_filename: Optional[str] = None,
    active_page: Optional[str] = None
) -> str:
    """Generate a DataTables-powered HTML report with pagination and search.

    Cell values are inserted verbatim; callers escape plain text and may pass
    pre-rendered markup (e.g. diff highlighting).

    Args:
        title: Report title (escaped by caller)
        columns: List of column headers
        rows: List of row data (each row is a list of cell values)
        description: Optional description text shown above the table
        default_order: Default sort order as [[col_idx, 'asc'/'desc'], ...]
        csv_filename: Optional CSV filename for download button
        active_page: Which report page is active for navigation highlighting

    Returns:
        Complete HTML document as string
    """
    header_html = "".join(f'<th>{col}</th>' for col in columns)

    rows_html = []
    for row in rows:
        cells_html = "".join(f"<td>{cell if cell is not None else ''}</td>" for cell in row)
        rows_html.append(f"<tr>{cells_html}</tr>")
    table_body = "\n".join(rows_html)

    if default_order:
        order_json = str(default_order).replace("'", '"')
    else:
        order_json = '[[0, "asc"]]'

    download_btn_html = ""
    if csv_filename:
        download_btn_html = f'<a href="{csv_filename}" class="download-btn" download>📥 Download CSV</a>'

    # Helper to add 'active' class to current page
    def nav_class(page_name: str) -> str:
        return ' class="active"' if active_page == page_name else ''

    nav_links = "".join(
        f'<a href="{page}.html"{nav_class(page)}>{label}</a>'
        for page, label in _NAV_PAGES
    )

    return f'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>

    <!-- jQuery -->
    <script src="https://code.jquery.com/jquery-3.7.1.min.js"></script>

    <!-- DataTables CSS & JS -->
    <link rel="stylesheet" href="https://cdn.datatables.net/1.13.7/css/jquery.dataTables.min.css">
    <script src="https://cdn.datatables.net/1.13.7/js/jquery.dataTables.min.js"></script>

    <style>
        * {{
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }}

        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, Cantarell, sans-serif;
            background: white;
            color: #333;
        }}

        .nav-bar {{
            background: #1a73e8;
            display: flex;
            box-shadow: 0 2px 4px rgba(0,0,0,0.1);
        }}

        .nav-bar a {{
            padding: 15px 20px;
            color: white;
            text-decoration: none;
            border-right: 1px solid rgba(255,255,255,0.1);
        }}

        .nav-bar a.active {{
            background: #0d3c7a;
            font-weight: 600;
        }}

        .container {{
            max-width: 1600px;
            margin: 0 auto;
            padding: 30px;
        }}

        h1 {{
            color: #1a73e8;
            margin-bottom: 10px;
            font-size: 28px;
        }}

        .header-section {{
            display: flex;
            justify-content: space-between;
            align-items: center;
            margin-bottom: 20px;
        }}

        .download-btn {{
            background: #1a73e8;
            color: white;
            padding: 8px 16px;
            border-radius: 4px;
            font-size: 14px;
            text-decoration: none;
        }}

        .description {{
            color: #666;
            margin-bottom: 20px;
            font-size: 14px;
        }}

        #dataTable thead th {{
            background: #1a73e8 !important;
            color: white !important;
            padding: 12px !important;
        }}

        #dataTable tbody td {{
            padding: 10px 12px;
            font-family: ui-monospace, SFMono-Regular, Menlo, Consolas, monospace;
        }}

        .diff-highlight {{
            background: #fde2e1;
            color: #b3261e;
            border-radius: 2px;
        }}

        .footer {{
            margin-top: 30px;
            text-align: center;
            color: #999;
            font-size: 12px;
        }}
    </style>
</head>
<body>
    <nav class="nav-bar">{nav_links}</nav>
    <div class="container">
        <div class="header-section">
            <h1>{title}</h1>
            {download_btn_html}
        </div>
        {f'<div class="description">{description}</div>' if description else ''}

        <table id="dataTable" class="display">
            <thead>
                <tr>{header_html}</tr>
            </thead>
            <tbody>
{table_body}
            </tbody>
        </table>

        <div class="footer">
            Generated by List Reconcile Matcher • Powered by jQuery DataTables
        </div>
    </div>

    <script>
        $(document).ready(function() {{
            $('#dataTable').DataTable({{
                "order": {order_json},
                "pageLength": 25,
                "lengthMenu": [[10, 25, 50, 100, -1], [10, 25, 50, 100, "All"]]
            }});
        }});
    </script>
</body>
</html>
'''
