import openpyxl
from openpyxl.styles import Font, Border, Side
from pathlib import Path
from typing import Optional
from models.payroll import PayrollPeriod, PayrollRecord
from utils.formatters import format_currency, format_date
from config.settings import OUTPUT_DIR, COMPANY_NAME, CURRENCY_SYMBOL

MONEY_FORMAT = '#,##0.00'


class PayslipGenerator:
    """Generate individual payslip Excel files"""

    def __init__(self, output_dir: Optional[Path] = None):
        self.output_dir = Path(output_dir) if output_dir else OUTPUT_DIR / "payslips"
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def generate(self, record: PayrollRecord, period: PayrollPeriod) -> str:
        """Generate payslip Excel file"""

        # Create workbook
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = "Payslip"

        # Set column widths
        ws.column_dimensions['A'].width = 28
        ws.column_dimensions['B'].width = 18
        ws.column_dimensions['C'].width = 28
        ws.column_dimensions['D'].width = 18

        # Define styles
        header_font = Font(bold=True, size=12)
        bold_font = Font(bold=True)
        thin_border = Border(
            left=Side(style='thin'),
            right=Side(style='thin'),
            top=Side(style='thin'),
            bottom=Side(style='thin')
        )

        # Header section
        ws['A1'] = "PAYSLIP"
        ws['A1'].font = header_font
        ws['C1'] = COMPANY_NAME
        ws['C1'].font = bold_font

        ws['A2'] = "Pay period"
        ws['B2'] = period.label
        ws['C2'] = "Coverage"
        ws['D2'] = f"{format_date(period.start_date)} to {format_date(period.end_date)}"

        ws['A3'] = "Pay date"
        ws['B3'] = format_date(period.pay_date)

        # Employee information
        ws['A5'] = "Employee"
        ws['B5'] = record.employee_name
        ws['C5'] = "Employee ID"
        ws['D5'] = record.employee_id

        ws['A6'] = "Department"
        ws['B6'] = record.department
        ws['C6'] = "Position"
        ws['D6'] = record.position

        # Earnings and deductions side by side
        row = 8
        ws[f'A{row}'] = "Earnings"
        ws[f'C{row}'] = "Deductions"
        for cell in [f'A{row}', f'B{row}', f'C{row}', f'D{row}']:
            ws[cell].font = bold_font
            ws[cell].border = thin_border

        earnings = [("Basic salary", record.basic_salary)]
        if record.overtime:
            earnings.append(("Overtime", record.overtime))
        if record.holiday:
            earnings.append(("Holiday pay", record.holiday))
        if record.allowances:
            earnings.append(("Allowances", record.allowances))

        deductions = [
            ("SSS", record.sss),
            ("PhilHealth", record.philhealth),
            ("Pag-IBIG", record.pagibig),
            ("Withholding tax", record.tax),
        ]

        for offset in range(max(len(earnings), len(deductions))):
            r = row + 1 + offset
            if offset < len(earnings):
                label, amount = earnings[offset]
                ws[f'A{r}'] = label
                ws[f'B{r}'] = float(amount)
                ws[f'B{r}'].number_format = MONEY_FORMAT
            if offset < len(deductions):
                label, amount = deductions[offset]
                ws[f'C{r}'] = label
                ws[f'D{r}'] = float(amount)
                ws[f'D{r}'].number_format = MONEY_FORMAT

        # Totals
        row = row + 1 + max(len(earnings), len(deductions))
        ws[f'A{row}'] = "Gross pay"
        ws[f'B{row}'] = float(record.gross_pay)
        ws[f'C{row}'] = "Total deductions"
        ws[f'D{row}'] = float(record.total_deductions)
        for cell in [f'A{row}', f'B{row}', f'C{row}', f'D{row}']:
            ws[cell].font = bold_font
            ws[cell].border = thin_border
        ws[f'B{row}'].number_format = MONEY_FORMAT
        ws[f'D{row}'].number_format = MONEY_FORMAT

        # Net pay
        row += 2
        ws[f'A{row}'] = "NET PAY"
        ws[f'A{row}'].font = Font(bold=True, size=14)
        ws[f'B{row}'] = format_currency(record.net_pay, CURRENCY_SYMBOL)
        ws[f'B{row}'].font = Font(bold=True, size=14)

        # Generate filename
        filename = f"{record.employee_id}_{period.period_id}_payslip.xlsx"
        filepath = self.output_dir / filename

        # Save workbook
        wb.save(filepath)

        return str(filepath)
