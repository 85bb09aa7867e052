# Spinning cube shown while an APOD request is in flight
LOADER_HTML = """
<style>
.cube-loader {
  position: relative;
  width: 75px;
  height: 75px;
  margin: 30vh auto 0 auto;
  transform-style: preserve-3d;
  transform: rotateX(-30deg);
  animation: cube-spin 4s linear infinite;
}
.cube-loader .cube-wrapper {
  position: absolute;
  width: 100%;
  height: 100%;
  transform-style: preserve-3d;
}
.cube-loader .cube-span {
  position: absolute;
  width: 100%;
  height: 100%;
  transform: rotateY(calc(90deg * var(--i))) translateZ(37.5px);
  background: linear-gradient(to bottom, #0b1016 0%, #1b3a5c 55%, #4fa3ff 100%);
}
.cube-loader .cube-top {
  position: absolute;
  width: 75px;
  height: 75px;
  background: #0b1016;
  transform: rotateX(90deg) translateZ(37.5px);
  transform-style: preserve-3d;
}
.cube-loader .cube-top::before {
  content: "";
  position: absolute;
  width: 75px;
  height: 75px;
  background: #4fa3ff;
  transform: translateZ(-90px);
  filter: blur(10px);
  box-shadow: 0 0 10px #1b3a5c, 0 0 20px #4fa3ff, 0 0 30px #1b3a5c;
}
@keyframes cube-spin {
  0% { transform: rotateX(-30deg) rotateY(0); }
  100% { transform: rotateX(-30deg) rotateY(360deg); }
}
</style>
<div class="cube-loader">
  <div class="cube-top"></div>
  <div class="cube-wrapper">
    <span style="--i:0" class="cube-span"></span>
    <span style="--i:1" class="cube-span"></span>
    <span style="--i:2" class="cube-span"></span>
    <span style="--i:3" class="cube-span"></span>
  </div>
</div>
"""


def show_loader(placeholder) -> None:
    """Draw the cube loader into an ``st.empty()`` placeholder."""
    placeholder.markdown(LOADER_HTML, unsafe_allow_html=True)
