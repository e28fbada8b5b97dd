"""Help and version text for the command line."""

from __future__ import annotations

VERSION = "1.70"
DEFAULT_NAME = "UxPlay"
LOWEST_ALLOWED_PORT = 1024
HIGHEST_PORT = 65535
NTP_TIMEOUT_LIMIT = 5


def version_text() -> str:
    """The one-line version report printed by "-v"."""
    return f'{DEFAULT_NAME} version {VERSION}; for help, use option "-h"'


def usage_text(program: str) -> str:
    """The full option summary printed by "-h"."""
    lines = [
        f"{DEFAULT_NAME} {VERSION}: An open-source AirPlay mirroring server.",
        f"Usage: {program} [-n name] [-s wxh] [-p [n]] [(other options)]",
        "Options:",
        "-n name   Specify the network name of the AirPlay server",
        '-nh       Do not add "@hostname" at the end of AirPlay server name',
        "-h265     Support h265 (4K) video (with h265 versions of h264 plugins)",
        "-pin[xxxx]Use a 4-digit pin code to control client access (default: no)",
        "          default pin is random: optionally use fixed pin xxxx",
        "-reg [fn] Keep a register in $HOME/.uxplay.register to verify returning",
        '          client pin-registration; (option: use file "fn" for this)',
        "-vsync [x]Mirror mode: sync audio to video using timestamps (default)",
        "          x is optional audio delay: millisecs, decimal, can be neg.",
        "-vsync no Switch off audio/(server)video timestamp synchronization ",
        "-async [x]Audio-Only mode: sync audio to client video (default: no)",
        "-async no Switch off audio/(client)video timestamp synchronization",
        "-db l[:h] Set minimum volume attenuation to l dB (decibels, negative);",
        "          optional: set maximum to h dB (+ or -) default: -30.0:0.0 dB",
        '-taper    Use a "tapered" AirPlay volume-control profile',
        "-s wxh[@r]Request to client for video display resolution [refresh_rate]",
        "          default 1920x1080[@60] (or 3840x2160[@60] with -h265 option)",
        '-o        Set display "overscanned" mode on (not usually needed)',
        "-fs       Full-screen (only works with X11, Wayland, VAAPI, D3D11)",
        "-p        Use legacy ports UDP 6000:6001:7011 TCP 7000:7001:7100",
        f"-p n      Use TCP and UDP ports n,n+1,n+2. range {LOWEST_ALLOWED_PORT}-{HIGHEST_PORT}",
        '          use "-p n1,n2,n3" to set each port, "n1,n2" for n3 = n2+1',
        '          "-p tcp n" or "-p udp n" sets TCP or UDP ports separately',
        "-avdec    Force software h264 video decoding with libav decoder",
        '-vp ...   Choose the GSteamer h264 parser: default "h264parse"',
        '-vd ...   Choose the GStreamer h264 decoder; default "decodebin"',
        "          choices: (software) avdec_h264; (hardware) v4l2h264dec,",
        "          nvdec, nvh264dec, vaapih64dec, vtdec,etc.",
        '-vc ...   Choose the GStreamer videoconverter; default "videoconvert"',
        "          another choice when using v4l2h264dec: v4l2convert",
        '-vs ...   Choose the GStreamer videosink; default "autovideosink"',
        "          some choices: ximagesink,xvimagesink,vaapisink,glimagesink,",
        "          gtksink,waylandsink,osxvideosink,kmssink,d3d11videosink etc.",
        "-vs 0     Streamed audio only, with no video display window",
        "-v4l2     Use Video4Linux2 for GPU hardware h264 decoding",
        "-bt709    Sometimes needed for Raspberry Pi with GStreamer < 1.22 ",
        '-as ...   Choose the GStreamer audiosink; default "autoaudiosink"',
        "          some choices:pulsesink,alsasink,pipewiresink,jackaudiosink,",
        "          osssink,oss4sink,osxaudiosink,wasapisink,directsoundsink.",
        "-as 0     (or -a)  Turn audio off, streamed video only",
        "-al x     Audio latency in seconds (default 0.25) reported to client.",
        "-ca <fn>  In Airplay Audio (ALAC) mode, write cover-art to file <fn>",
        f"-reset n  Reset after 3n seconds client silence (default {NTP_TIMEOUT_LIMIT}, 0=never)",
        "-nofreeze Do NOT leave frozen screen in place after reset",
        "-nc       Do NOT Close video window when client stops mirroring",
        "-nohold   Drop current connection when new client connects.",
        '-restrict Restrict clients to those specified by "-allow <deviceID>"',
        "          the server displays deviceID when a client attempts to connect",
        '          Use "-restrict no" for no client restrictions (default)',
        "-allow <i>Permit deviceID = <i> to connect if restrictions are imposed",
        "-block <i>Always block connections from deviceID = <i>",
        "-FPSdata  Show video-streaming performance reports sent by client.",
        "-fps n    Set maximum allowed streaming framerate, default 30",
        "-f {H|V|I}Horizontal|Vertical flip, or both=Inversion=rotate 180 deg",
        "-r {R|L}  Rotate 90 degrees Right (cw) or Left (ccw)",
        "-m [mac]  Set MAC address (also Device ID);use for concurrent servers",
        "          if mac xx:xx:xx:xx:xx:xx is not given, a random MAC is used",
        '-key [fn] Store private key in $HOME/.uxplay.pem (or in file "fn")',
        "-dacp [fn]Export client DACP information to file $HOME/.uxplay.dacp",
        '          (option to use file "fn" instead); used for client remote',
        '-vdmp [n] Dump h264 video output to "fn.h264"; fn="videodump",change',
        '          with "-vdmp [n] filename". If [n] is given, file fn.x.h264',
        "          x=1,2,.. opens whenever a new SPS/PPS NAL arrives, and <=n",
        "          NAL units are dumped.",
        '-admp [n] Dump audio output to "fn.x.fmt", fmt ={aac, alac, aud}, x',
        '          =1,2,..; fn="audiodump"; change with "-admp [n] filename".',
        "          x increases when audio format changes. If n is given, <= n",
        '          audio packets are dumped. "aud"= unknown format.',
        "-d        Enable debug logging",
        "-v        Displays version information",
        "-h        Displays this help",
        "Startup options in $UXPLAYRC, ~/.uxplayrc, or ~/.config/uxplayrc are",
        "applied first (command-line options may modify them): format is one ",
        'option per line, no initial "-"; lines starting with "#" are ignored.',
    ]
    return "\n".join(lines) + "\n"