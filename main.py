# Application entry point: interactive polyscope viewer, or a headless run
# that writes the selected display field of every output frame to .npy files
import os
import time
import argparse
import numpy as np
import polyscope as ps
import polyscope.imgui as psim
import warp as wp
import torch
from sim_wrapper import *

wp.init() #initialize warp

sim = None

#Global variables for UI
simulating = False
scene_file_path = None
display_mode = "dye"
realtime = False
last_time = None

MOUSE_POINTER_ID = 0

def display_image(values, mode):
    """Map a committed field to an (H, W, 3) RGB image in [0, 1], row 0 at the bottom."""
    if mode == "dye":
        rgb = values[:, :, :3]
    elif mode == "velocity":
        rgb = np.stack([
            0.5 + 0.5 * values[:, :, 0],
            0.5 + 0.5 * values[:, :, 1],
            np.full(values.shape[:2], 0.5, dtype=values.dtype),
        ], axis=-1)
    elif mode == "pressure":
        rgb = np.repeat(0.5 + 0.5 * values[:, :, :1], 3, axis=-1)
    else:
        raise ValueError(f"Unknown display mode: {mode}. Must be one of {DISPLAY_MODES}")
    return np.clip(rgb, 0.0, 1.0)

def reset_clock():
    # the next realtime tick starts from dt = 0 instead of spanning a pause
    global last_time
    last_time = None

def set_simulating(running):
    global simulating
    if running and not simulating:
        reset_clock()
    simulating = running

#callback to run one simulation step
def simulation_step():
    global last_time
    dt = None
    if realtime:
        now = time.perf_counter()
        dt = 0.0 if last_time is None else now - last_time
        last_time = now
    sim.step(dt)

def read_display():
    image = display_image(sim.get_display(display_mode), display_mode)
    ps.add_color_image_quantity(
        "fluid", image, enabled=True, image_origin="lower_left", show_fullscreen=True
    )

def simulation_init(scene_file=None, device="cpu"):
    global sim
    print("Initialized Sim")
    reset_clock()
    if scene_file:
        print(f"Loading scene from: {scene_file}")
        sim = Sim_Wrapper(scene_file=scene_file, device=device)
    else:
        sim = Sim_Wrapper(device=device)
    read_display()

def track_mouse():
    # imgui reports the mouse in window pixels with y pointing down
    io = psim.GetIO()
    width, height = ps.get_window_size()
    mouse_x, mouse_y = io.MousePos
    x = mouse_x / max(width, 1)
    y = 1.0 - mouse_y / max(height, 1)

    if psim.IsMouseDown(0) and not io.WantCaptureMouse:
        if sim.pointers.is_active(MOUSE_POINTER_ID):
            sim.pointers.move(MOUSE_POINTER_ID, x, y)
        else:
            sim.pointers.press(MOUSE_POINTER_ID, x, y)
    else:
        sim.pointers.release(MOUSE_POINTER_ID)

def ui_callback():
    global display_mode
    changed_sim, running = psim.Checkbox("Start Simulation", simulating)
    set_simulating(running)

    params = sim.params
    _, params.viscosity = psim.SliderFloat("Viscosity", params.viscosity, v_min=0.0, v_max=0.01)
    _, params.splat_radius = psim.SliderFloat("Splat radius", params.splat_radius, v_min=1e-4, v_max=0.05)
    _, params.velocity_dissipation = psim.SliderFloat("Velocity dissipation", params.velocity_dissipation, v_min=0.9, v_max=1.0)
    _, params.dye_dissipation = psim.SliderFloat("Dye dissipation", params.dye_dissipation, v_min=0.9, v_max=1.0)
    _, params.pressure_retention = psim.SliderFloat("Pressure retention", params.pressure_retention, v_min=0.0, v_max=1.0)

    for mode in DISPLAY_MODES:
        if psim.RadioButton(mode, display_mode == mode):
            display_mode = mode

    track_mouse()

    #button to run one step of the simulation
    if psim.Button("Step"):
        simulation_step()
        read_display()

    #reset button
    if psim.Button("Reset Simulation"):
        print("Resetting Simulation")
        global scene_file_path
        device = sim.device if sim else "cpu"
        simulation_init(scene_file=scene_file_path, device=device)

    if simulating:
        simulation_step()
        read_display()

if __name__ == "__main__":
    #check arguments, load approriate scene and run configuration
    parser = argparse.ArgumentParser(description="Stable fluids on a warp grid")
    parser.add_argument("--scene", help="Path to the scene file")
    parser.add_argument("--output_dir", help="Directory for headless .npy frames, requires num_steps parameter")
    parser.add_argument("--num_steps", help="Number of steps to simulate", type=int)
    parser.add_argument("--device", help="Device to use", type=str, default="cpu")
    parser.add_argument("--display", help="Field to show or write", choices=DISPLAY_MODES)
    parser.add_argument("--realtime", help="Use wall-clock time between frames as dt", action="store_true")
    args = parser.parse_args()

    print("CUDA available: ", torch.cuda.is_available())

    if args.device == "cuda":
        sim_device = "cuda:0"
    else:
        sim_device = args.device
    wp.set_device(sim_device)

    scene_file_path = args.scene
    realtime = args.realtime

    if args.output_dir:
        if args.num_steps:
            sim = Sim_Wrapper(scene_file=args.scene, device=sim_device)
            mode = args.display or sim.scene.display
            os.makedirs(args.output_dir, exist_ok=True)
            print(f"Writing {mode} frames to {args.output_dir}")

            for k in range(args.num_steps):
                print("Step "+str(k))
                sim.step()
                np.save(os.path.join(args.output_dir, f"frame_{k:04d}.npy"), sim.get_display(mode))

            exit()
        else:
            print("Num steps not provided, skipping headless output")
            exit()

    # initialize polyscope
    ps.init()

    simulation_init(scene_file=args.scene, device=sim_device)
    display_mode = args.display or sim.scene.display

    ps.set_user_callback(ui_callback)

    #turn off polyscope ground plane
    ps.set_ground_plane_mode("none")
    ps.show()
