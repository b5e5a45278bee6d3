import openpyxl
from openpyxl.styles import Font, Alignment, Border, Side, PatternFill
from pathlib import Path
from typing import List, Optional
from models.payroll import PayrollPeriod, PayrollRecord, PeriodTotals
from processors.payroll_reports import contribution_breakdown
from config.settings import OUTPUT_DIR, COMPANY_NAME

MONEY_FORMAT = '#,##0.00'

REGISTER_COLUMNS = [
    ('Employee ID', 'employee_id', 12),
    ('Name', 'employee_name', 24),
    ('Department', 'department', 20),
    ('Position', 'position', 22),
    ('Basic', 'basic_salary', 14),
    ('Overtime', 'overtime', 12),
    ('Holiday', 'holiday', 12),
    ('Allowances', 'allowances', 12),
    ('Gross Pay', 'gross_pay', 14),
    ('SSS', 'sss', 10),
    ('PhilHealth', 'philhealth', 12),
    ('Pag-IBIG', 'pagibig', 10),
    ('Tax', 'tax', 12),
    ('Total Deductions', 'total_deductions', 16),
    ('Net Pay', 'net_pay', 14),
]
FIRST_MONEY_COLUMN = 5


class PayrollRegisterGenerator:
    """Generate the payroll register of a period"""

    def __init__(self, output_dir: Optional[Path] = None):
        self.output_dir = Path(output_dir) if output_dir else OUTPUT_DIR / "registers"
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def generate(self, period: PayrollPeriod, records: List[PayrollRecord]) -> str:
        """Generate payroll register Excel file: one row per record, a totals row and agency contributions"""

        # Create workbook
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = period.period_id

        # Define styles
        bold_font = Font(bold=True)
        header_fill = PatternFill(start_color="B4C7E7", end_color="B4C7E7", fill_type="solid")
        total_fill = PatternFill(start_color="FFFF99", end_color="FFFF99", fill_type="solid")
        thin_border = Border(
            left=Side(style='thin'),
            right=Side(style='thin'),
            top=Side(style='thin'),
            bottom=Side(style='thin')
        )

        # Title
        ws['A1'] = f"{COMPANY_NAME} - PAYROLL REGISTER"
        ws['A1'].font = Font(bold=True, size=14)
        ws['A2'] = f"{period.label} ({period.start_date} to {period.end_date}), pay date {period.pay_date}"
        ws['A2'].font = Font(italic=True)

        # Headers
        row = 4
        for col_idx, (header, _, width) in enumerate(REGISTER_COLUMNS, start=1):
            cell = ws.cell(row=row, column=col_idx, value=header)
            cell.font = bold_font
            cell.fill = header_fill
            cell.border = thin_border
            cell.alignment = Alignment(horizontal='center', vertical='center', wrap_text=True)
            ws.column_dimensions[cell.column_letter].width = width

        # Data rows
        for record in sorted(records, key=lambda r: r.employee_id):
            row += 1
            for col_idx, (_, attr, _) in enumerate(REGISTER_COLUMNS, start=1):
                value = getattr(record, attr)
                cell = ws.cell(row=row, column=col_idx)
                if col_idx >= FIRST_MONEY_COLUMN:
                    cell.value = float(value)
                    cell.number_format = MONEY_FORMAT
                else:
                    cell.value = value
                cell.border = thin_border

        # Totals row
        row += 1
        ws.cell(row=row, column=1, value="TOTAL")
        ws.cell(row=row, column=2, value=len(records))
        for col_idx in range(FIRST_MONEY_COLUMN, len(REGISTER_COLUMNS) + 1):
            attr = REGISTER_COLUMNS[col_idx - 1][1]
            cell = ws.cell(row=row, column=col_idx, value=float(sum(getattr(r, attr) for r in records)))
            cell.number_format = MONEY_FORMAT
        for col_idx in range(1, len(REGISTER_COLUMNS) + 1):
            cell = ws.cell(row=row, column=col_idx)
            cell.font = bold_font
            cell.fill = total_fill
            cell.border = thin_border

        # Period summary as stored on the period
        row += 2
        totals: PeriodTotals = period.totals
        summary = [
            ("Employees", totals.total_employees),
            ("Gross pay", float(totals.gross_pay)),
            ("Deductions", float(totals.deductions)),
            ("Net pay", float(totals.net_pay)),
            ("Status", period.status),
        ]
        for label, value in summary:
            ws.cell(row=row, column=1, value=label).font = bold_font
            cell = ws.cell(row=row, column=2, value=value)
            if isinstance(value, float):
                cell.number_format = MONEY_FORMAT
            row += 1

        # Government contributions
        row += 1
        for col_idx, header in enumerate(['Contribution', 'Employee', 'Employer', 'Total'], start=1):
            cell = ws.cell(row=row, column=col_idx, value=header)
            cell.font = bold_font
            cell.fill = header_fill
            cell.border = thin_border
        for line in contribution_breakdown(records):
            row += 1
            ws.cell(row=row, column=1, value=line.name).border = thin_border
            for col_idx, amount in enumerate([line.employee, line.employer, line.total], start=2):
                cell = ws.cell(row=row, column=col_idx, value=float(amount))
                cell.number_format = MONEY_FORMAT
                cell.border = thin_border

        # Generate filename
        filename = f"payroll_register_{period.period_id}.xlsx"
        filepath = self.output_dir / filename

        # Save workbook
        wb.save(filepath)

        return str(filepath)
