import sys
from typing import Optional, TextIO

from constants import BANNER_WIDTH, SECTION_RULE
from formatting import AmountFormatter, YenFormatter
from simulation import TargetWealthProjector


def _banner(out: TextIO, *titles: str) -> None:
    print("╔" + "═" * BANNER_WIDTH + "╗", file=out)
    for title in titles:
        print(f"║  {title:<{BANNER_WIDTH - 2}}║", file=out)
    print("╚" + "═" * BANNER_WIDTH + "╝", file=out)


def _section(title: str, out: TextIO) -> None:
    print(f"\n{SECTION_RULE}", file=out)
    print(title, file=out)
    print(f"{SECTION_RULE}\n", file=out)


def _print_header(projector: TargetWealthProjector, fmt: AmountFormatter, out: TextIO) -> None:
    p = projector.params_model
    _banner(
        out,
        f"目標資産{fmt.format(p.target_amount)}達成シミュレーター",
        f"(インデックス投資 - 年利{p.annual_rate * 100:g}%固定)",
    )
    print(f"🎯 目標資産: {fmt.format(p.target_amount)}", file=out)
    print(f"📊 想定年利: {p.annual_rate * 100:.1f}% (インデックス投資の長期平均)", file=out)
    print(f"💰 現在の月額投資: {fmt.format(p.current_monthly_contribution)}", file=out)


def _print_required_table(projector: TargetWealthProjector, fmt: AmountFormatter, out: TextIO) -> None:
    _section(f"📈 目標{fmt.format(projector.params_model.target_amount)}達成に必要な毎月の投資額", out)
    print(f"{'期間':<8} {'必要月額':<18} {'総投資額(元本)':<18} {'運用益':<15} {'達成可否':<12}", file=out)
    print("─" * 80, file=out)

    for row in projector.required_contribution_table().to_dict("records"):
        achievable = "✅ 達成可能" if row["Achievable"] else "❌ 足りないよ！"
        print(
            f"{row['Years']:>6}年 {fmt.format(row['Required Monthly']):>18} "
            f"{fmt.format(row['Total Invested']):>18} {fmt.format(row['Profit']):>15} "
            f"({row['Profit Rate']:.0f}%) {achievable}",
            file=out,
        )


def _print_current_table(projector: TargetWealthProjector, fmt: AmountFormatter, out: TextIO) -> None:
    _section(f"📊 現在の投資額（{fmt.format(projector.params_model.current_monthly_contribution)}）で到達できる資産額", out)
    print(f"{'期間':<8} {'最終資産':<18} {'総投資額(元本)':<18} {'運用益':<18}", file=out)
    print("─" * 75, file=out)

    for row in projector.current_contribution_table().to_dict("records"):
        print(
            f"{row['Years']:>6}年 {fmt.format(row['Final Balance']):>18} "
            f"{fmt.format(row['Total Invested']):>18} {fmt.format(row['Profit']):>18} "
            f"({row['Profit Rate']:.0f}%)",
            file=out,
        )


def _print_trajectory(projector: TargetWealthProjector, fmt: AmountFormatter, out: TextIO) -> None:
    p = projector.params_model
    _section(
        f"📈 年次資産推移（毎月{fmt.format(p.current_monthly_contribution)}で{p.trajectory_years}年間投資した場合）",
        out,
    )
    print(f"{'経過年数':<8} {'資産額':<18} {'投資額(累計)':<18} {'運用益':<18}", file=out)
    print("─" * 75, file=out)

    for row in projector.trajectory_table(milestones_only=True).to_dict("records"):
        marker = "🎯" if row["Target Reached"] else "  "
        print(
            f"{marker}{row['Year']:>6}年 {fmt.format(row['Balance']):>18} "
            f"{fmt.format(row['Total Invested']):>18} {fmt.format(row['Profit']):>18}",
            file=out,
        )


def _print_summary(projector: TargetWealthProjector, fmt: AmountFormatter, out: TextIO) -> None:
    p = projector.params_model
    outlook = projector.outlook()

    print("\n", file=out)
    _banner(out, "まとめ")
    print(f"• 年利{p.annual_rate * 100:g}%のインデックス投資（S&P500など）を想定", file=out)
    print("• 複利効果により、長期投資ほど有利", file=out)
    print(f"• 現在の投資額（{fmt.format(p.current_monthly_contribution)}）を継続した場合:", file=out)

    if outlook.target_met:
        print(f"  → {outlook.trajectory_years}年で目標{fmt.format(outlook.target_amount)}を達成可能！ 🎉", file=out)
    else:
        print(
            f"  → {outlook.trajectory_years}年後は約{fmt.format(outlook.final_balance)} "
            f"(目標まであと{fmt.format(outlook.shortfall)})",
            file=out,
        )
        print(f"  → 目標達成には月額あと{fmt.format(outlook.additional_monthly_needed)}の追加投資が必要", file=out)

    print("\n💡 ポイント:", file=out)
    print("  • 早く始めるほど複利効果が大きい", file=out)
    print("  • 長期投資（20年以上）が推奨", file=out)
    print("  • 実際の年利は変動するため、余裕を持った計画を\n", file=out)


def print_report(
    projector: TargetWealthProjector,
    formatter: Optional[AmountFormatter] = None,
    file: Optional[TextIO] = None,
) -> None:
    """
    Prints the full projection report: banner, required contribution per horizon,
    balance reached with the current contribution, the yearly trajectory and a summary.
    """
    fmt = formatter if formatter is not None else YenFormatter()
    out = file if file is not None else sys.stdout

    _print_header(projector, fmt, out)
    _print_required_table(projector, fmt, out)
    _print_current_table(projector, fmt, out)
    _print_trajectory(projector, fmt, out)
    _print_summary(projector, fmt, out)
