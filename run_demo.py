"""Demo script: fly a full headless mission and show the phase timeline."""
from rocket_sim import RocketContext, TelemetryRecorder, ConsoleObserver

recorder = TelemetryRecorder()
rocket = RocketContext(observers=[ConsoleObserver(), recorder])

rocket.checks()
rocket.launch()
ticks = rocket.fast_forward(1000)

summary = recorder.summary()
print("\n\n===== MISSION SUMMARY =====")
print(f"Ticks flown: {ticks}")
print(f"Final phase: {summary['final_phase']}")
print(f"Final fuel: {summary['final_fuel']}%")
print(f"Peak altitude: {summary['peak_altitude']:.1f} km")
print(f"Peak speed: {summary['peak_speed']:.0f} km/h")
print()
print("Phase Timeline:")
for tick, phase in summary['phase_timeline']:
    print(f"  t={tick:5d} | Phase: {phase}")
